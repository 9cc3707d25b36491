"""Command-line interface for the pubtimeline project."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Optional

import httpx
import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pubtimeline.exporters import (
    export_feature_csv,
    export_link_list,
    export_records_json,
    load_records_json,
)
from pubtimeline.services import (
    BatchResult,
    BatchRunner,
    ExtractionOutcome,
    ExtractionSuccess,
    FeatureCalculator,
    HttpPageLoader,
    ListingCrawler,
)
from pubtimeline.settings import Settings, configure_logging, get_settings
from pubtimeline.utils import parse_link_list

console = Console()
app = typer.Typer(help="pubtimeline – article lifecycle harvester")
logger = structlog.get_logger(__name__)


@app.callback()
def main() -> None:
    """Harvest article lifecycle dates and derive publication timelines."""
    configure_logging(Settings.load().log_level)


@app.command()
def config(
    json_output: bool = typer.Option(False, "--json", help="Output settings as JSON"),
) -> None:
    """Display the resolved settings."""
    settings = get_settings()
    if json_output:
        typer.echo(settings.model_dump_json(indent=2))
        return
    table = Table(title="pubtimeline Settings")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@app.command()
def links(
    start_url: str = typer.Argument(..., help="First listing page, e.g. a journal's article index"),
    pages: int = typer.Argument(..., min=1, help="Number of listing pages to walk"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write links to file"),
) -> None:
    """Collect article links from a paged listing."""
    settings = get_settings()

    async def runner() -> list[str]:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            crawler = ListingCrawler(HttpPageLoader(client=client, settings=settings))
            return await crawler.collect(start_url, pages)

    collected = asyncio.run(runner())
    destination = output or settings.links_path
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(export_link_list(collected), encoding="utf-8")
    console.print(f"[green]Wrote {len(collected)} links to {destination}")


@app.command()
def harvest(
    input_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Newline-separated article links"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", help="Directory for data.json and errors.txt"
    ),
) -> None:
    """Collect title, DOI and lifecycle dates for every linked article."""
    article_links = parse_link_list(input_file.read_text(encoding="utf-8"))
    if not article_links:
        console.print("[yellow]No links found in the input file.")
        return

    settings = get_settings()
    records_path = output_dir / "data.json" if output_dir else settings.records_path
    failures_path = output_dir / "errors.txt" if output_dir else settings.failures_path

    async def runner() -> BatchResult:
        async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
            loader = HttpPageLoader(client=client, settings=settings)
            batch = BatchRunner(loader, on_outcome=_print_outcome)
            return await batch.run(article_links)

    console.print("Collecting article information for:")
    result = asyncio.run(runner())
    _print_overview(result)

    records_path.parent.mkdir(parents=True, exist_ok=True)
    failures_path.parent.mkdir(parents=True, exist_ok=True)
    records_path.write_text(export_records_json(result.successes), encoding="utf-8")
    failures_path.write_text(export_link_list(result.failures), encoding="utf-8")
    console.print(f"[green]Data file saved:[/green] {records_path}")
    console.print(f"[green]Error file saved:[/green] {failures_path}")


def _print_outcome(outcome: ExtractionOutcome) -> None:
    if isinstance(outcome, ExtractionSuccess):
        console.print(f"- [green][SUCCESS][/green]: {escape(outcome.record.title)}")
    else:
        console.print(f"- [red][ERROR][/red]: {escape(outcome.link)}")


def _print_overview(result: BatchResult) -> None:
    total = result.total
    console.print("\nOverview:")
    console.print(f"- {len(result.successes)}/{total} successful.")
    console.print(f"- {len(result.failures)}/{total} failed.")


@app.command()
def features(
    input_json: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Records file written by harvest"
    ),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="CSV destination"),
) -> None:
    """Derive month/year columns and lifecycle day spans as a ';'-separated CSV."""
    try:
        records = load_records_json(input_json.read_text(encoding="utf-8"))
    except ValidationError as exc:
        console.print(f"[red]Could not read records from {input_json}: {exc.error_count()} errors[/red]")
        raise typer.Exit(code=1) from exc

    rows = FeatureCalculator().calculate_many(records)
    destination = output or get_settings().features_path
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(export_feature_csv(rows), encoding="utf-8")
    console.print(f"[green]Wrote {len(rows)} rows to {destination}")


@app.command()
def doctor() -> None:
    """Environment checks (Python, deps, data directory)."""
    checks: list[tuple[str, bool, str]] = []
    checks.append(("python>=3.11", sys.version_info >= (3, 11), sys.version))
    for mod in ("httpx", "bs4", "dateutil", "structlog"):
        try:
            module = __import__(mod)
            ver = getattr(module, "__version__", "unknown")
            checks.append((f"{mod} import", True, ver))
        except Exception as exc:  # pragma: no cover
            checks.append((f"{mod} import", False, str(exc)))
    settings = get_settings()
    data_dir = settings.data_dir
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        probe = data_dir / ".pubtimeline_doctor"
        probe.write_text("ok", encoding="utf-8")
        probe.unlink()
        checks.append(("data_dir writable", True, str(data_dir)))
    except OSError as exc:  # pragma: no cover
        checks.append(("data_dir writable", False, str(exc)))

    passed = True
    for name, ok, note in checks:
        status = "[green]OK[/green]" if ok else "[red]FAIL[/red]"
        console.print(f"{status} {name} ({note})")
        passed = passed and ok
    if not passed:
        raise typer.Exit(code=1)
    console.print("[green]Doctor checks passed.[/green]")
