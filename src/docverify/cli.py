"""Command-line interface for docverify."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from docverify import __version__
from docverify.core.config import Config
from docverify.exceptions import DocverifyError
from docverify.extraction.samples import SampleTextExtractor, get_sample_text
from docverify.models.document_type import DocumentType
from docverify.models.results import OverallStatus, ValidationResult
from docverify.utils.logging import setup_logging
from docverify.validation.registry import get_profile, supported_document_types
from docverify.validation.validator import DocumentValidator

app = typer.Typer(
    name="docverify",
    help="Rule-based validation of gazette supporting documents.",
    add_completion=False,
)
console = Console()

EXIT_NOT_VALID = 1
EXIT_CONFIG_ERROR = 2

STATUS_COLORS = {
    OverallStatus.VALID: "green",
    OverallStatus.SUSPICIOUS: "yellow",
    OverallStatus.INVALID: "red",
}


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
):
    """docverify: Score uploaded documents against their declared type."""
    ctx.obj = {"verbose": verbose}
    setup_logging(level="DEBUG" if verbose else "WARNING")


@app.command()
def version():
    """Show version information."""
    console.print(f"docverify version {__version__}")


@app.command()
def validate(
    ctx: typer.Context,
    file_path: Path = typer.Argument(..., help="Path to text, PDF or image file"),
    document_type: DocumentType = typer.Option(..., "--type", "-t", help="Declared document type"),
    threshold: Optional[float] = typer.Option(
        None, "--threshold", min=0, max=100, help="Pass threshold percentage (default 70)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    demo: bool = typer.Option(False, "--demo", help="Use bundled sample text chosen by file name"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="JSON config file"),
):
    """Validate a document against the checks for its type."""
    try:
        config = Config.load(config_path)
        if not (ctx.obj or {}).get("verbose"):
            setup_logging(level=config.log_level)
        extractor = SampleTextExtractor() if demo else None
        validator = DocumentValidator(extractor=extractor, config=config)
        result = validator.validate(document_type, file_path, pass_threshold=threshold)
    except (DocverifyError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(EXIT_CONFIG_ERROR)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _display_result(result, file_path)

    if result.overall_status != OverallStatus.VALID:
        raise typer.Exit(EXIT_NOT_VALID)


@app.command()
def types():
    """List supported document types and their checks."""
    for document_type in supported_document_types():
        description = get_profile(document_type).describe()
        table = Table(
            title=f"{description['document_type']} ({document_type.label}, "
            f"{description['max_score']} points)"
        )
        table.add_column("Check", style="cyan")
        table.add_column("Max", justify="right")
        table.add_column("Pass bar", justify="right")
        table.add_column("Signals", style="dim")

        for check in description["checks"]:
            signals = ", ".join(f"{s['name']} ({s['points']})" for s in check["signals"])
            table.add_row(check["name"], str(check["max_score"]), str(check["pass_bar"]), signals)

        console.print(table)


@app.command()
def sample(
    document_type: DocumentType = typer.Argument(..., help="Document type"),
):
    """Print the bundled sample text for a document type."""
    typer.echo(get_sample_text(document_type))


def _display_result(result: ValidationResult, file_path: Path) -> None:
    """Display a validation result as a table with a verdict panel."""
    color = STATUS_COLORS.get(result.overall_status, "white")

    if result.error:
        console.print(f"[red]Extraction failed: {result.error}[/red]")

    if result.checks:
        table = Table(title=f"Checks: {file_path.name}", show_header=True)
        table.add_column("Check", style="cyan")
        table.add_column("Score", justify="right")
        table.add_column("Passed")
        table.add_column("Details", style="white")

        for check in result.checks:
            passed = "[green]yes[/green]" if check.passed else "[red]no[/red]"
            table.add_row(check.name, f"{check.score}/{check.max_score}", passed, check.details)

        console.print(table)

    summary = (
        f"Score: {result.score}/{result.max_score} ({result.percentage:.1f}%)\n"
        f"Threshold: {result.pass_threshold:g}%\n"
        f"Status: [{color}]{result.overall_status.value}[/{color}]"
    )
    if result.failed_checks:
        summary += "\nFailed checks: " + ", ".join(c.name for c in result.failed_checks)
    if result.needs_review:
        summary += "\n[yellow]Needs manual review[/yellow]"

    console.print(
        Panel(
            summary,
            title=result.document_type.value if result.document_type else "Result",
        )
    )


if __name__ == "__main__":
    app()
