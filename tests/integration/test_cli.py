import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from content_analyzer.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENRICHMENT_PROVIDER", "example")
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("ENRICHMENT_CREDENTIAL_FILES", "[]")


@pytest.fixture
def pdf_file(tmp_path: Path) -> Path:
    path = tmp_path / "brochure.pdf"
    path.write_bytes(b"x" * 2048)
    return path


@pytest.mark.integration
class TestCli:
    def test_prints_basic_analysis(self, pdf_file: Path) -> None:
        result = runner.invoke(app, [str(pdf_file)])
        assert result.exit_code == 0
        assert "Readability" in result.stdout

    def test_json_output_includes_deep_analysis(self, pdf_file: Path) -> None:
        result = runner.invoke(app, [str(pdf_file), "--deep", "--json"])
        assert result.exit_code == 0
        report = json.loads(result.stdout)
        assert report["file_name"] == "brochure.pdf"
        assert report["deep_analysis"]["brand_voice"] == "Friendly"

    def test_writes_report(self, pdf_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        result = runner.invoke(app, [str(pdf_file), "--report-dir", str(out)])
        assert result.exit_code == 0
        assert (out / "brochure-analysis.json").is_file()

    def test_invalid_input_exits_with_2(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 2
        assert "Invalid file type" in result.stdout

    def test_missing_file_exits_with_2(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "missing.png")])
        assert result.exit_code == 2

    def test_unknown_pdf_engine_exits_with_1(
        self, pdf_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PDF_ENGINE", "bogus")
        result = runner.invoke(app, [str(pdf_file)])
        assert result.exit_code == 1
        assert "Unknown PDF engine" in result.stdout
        assert result.exception is None or isinstance(result.exception, SystemExit)

    def test_unknown_provider_exits_with_1(
        self, pdf_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ENRICHMENT_PROVIDER", "nope")
        result = runner.invoke(app, [str(pdf_file)])
        assert result.exit_code == 1
        assert "Unknown enrichment provider" in result.stdout
