"""Command-line entry point for the content analyzer."""

import json
from dataclasses import asdict
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from content_analyzer.analysis.analyzer import build_analyzer
from content_analyzer.analysis.exceptions import AnalysisError, InvalidDocumentError
from content_analyzer.analysis.file_loader import FileLoader
from content_analyzer.analysis.models import AnalysisResult
from content_analyzer.analysis.report import build_report, write_report
from content_analyzer.config.settings import Settings
from content_analyzer.enrichment.exceptions import EnrichmentConfigurationError
from content_analyzer.logging.logger import Log

app = typer.Typer(
    name="content-analyzer",
    help="Extract text from a PDF or image and score it for social media.",
    add_completion=False,
)
console = Console()


@app.command()
def analyze(
    file_path: Path = typer.Argument(..., help="PDF or image file to analyze"),
    deep: bool = typer.Option(
        False,
        "--deep/--basic",
        help="Request an AI strategic assessment in addition to heuristic scoring",
    ),
    report_dir: Path | None = typer.Option(
        None,
        "--report-dir",
        "-o",
        help="Write a JSON report into this directory",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Analyze one document and print the result."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        analyzer = build_analyzer(settings)
    except (ValueError, EnrichmentConfigurationError) as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(1) from exc

    try:
        document = FileLoader(settings.max_upload_bytes).load(file_path)
        result = analyzer.analyze(document, enrich=deep)
    except AnalysisError as exc:
        console.print(f"[bold red]Error ({exc.status}):[/] {exc.message}")
        raise typer.Exit(2 if isinstance(exc, InvalidDocumentError) else 1) from exc

    if as_json:
        typer.echo(json.dumps(build_report(result), indent=2, ensure_ascii=False))
    else:
        _print_result(result)
    if report_dir is not None:
        path = write_report(result, report_dir)
        console.print(f"[dim]Report written to {path}[/]")


def _print_result(result: AnalysisResult) -> None:
    report = build_report(result)
    summary = Table(title=f"{result.file_name} ({result.file_type.value})")
    summary.add_column("Metric")
    summary.add_column("Value")
    summary.add_row("Words", str(result.analysis.word_count))
    summary.add_row("Characters", str(result.analysis.character_count))
    summary.add_row(
        "Readability",
        f"{result.analysis.readability_score} ({report['readability_label']})",
    )
    summary.add_row("Best platform", report["platform_match"])
    console.print(summary)

    console.print("[bold]Suggestions[/]")
    for suggestion in result.analysis.suggestions:
        console.print(f"  • {suggestion}")

    if result.enrichment is not None:
        console.print("[bold]AI assessment[/]")
        if result.enrichment_error:
            console.print(f"[yellow]Unavailable: {result.enrichment_error}[/]")
        console.print_json(json.dumps(asdict(result.enrichment), ensure_ascii=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
