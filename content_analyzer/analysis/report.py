"""Downloadable JSON report of an analysis."""

import json
import re
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from content_analyzer.analysis.models import AnalysisResult
from content_analyzer.enrichment.models import EnrichmentResult
from content_analyzer.scoring.scorer import readability_label, recommend_platform

_EXTENSION_RE = re.compile(r"\.[^/.]+$")


def build_report(
    result: AnalysisResult,
    generated_at: datetime | None = None,
) -> dict[str, Any]:
    generated_at = generated_at or datetime.now(timezone.utc)
    enrichment = result.enrichment or EnrichmentResult.placeholder()
    return {
        "file_name": result.file_name,
        "file_type": result.file_type.value,
        "generated_at": generated_at.isoformat(),
        "extracted_text": result.extracted_text,
        "basic_analysis": asdict(result.analysis),
        "deep_analysis": asdict(enrichment),
        "platform_match": recommend_platform(result.analysis.word_count),
        "readability_label": readability_label(result.analysis.readability_score),
    }


def report_file_name(file_name: str) -> str:
    """'post.png' -> 'post-analysis.json'."""
    stem = _EXTENSION_RE.sub("", file_name)
    return f"{stem or 'report'}-analysis.json"


def write_report(result: AnalysisResult, directory: Path) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / report_file_name(result.file_name)
    path.write_text(
        json.dumps(build_report(result), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return path
