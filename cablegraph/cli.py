"""Command line interface for cable connection extraction.

Usage:
    cablegraph extract deck_a.pdf deck_b.pdf --vessel-id MV-1
    cablegraph extract data/raw/ --strict-ethernet --csv out/connections.csv
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cablegraph.extraction.models import Edge, ExtractionReport, ReviewItem
from cablegraph.pipeline.extraction_pipeline import ExtractionPipeline
from cablegraph.reporting.exporters import (
    export_csv,
    export_json,
    export_review_markdown,
    filter_edges,
)
from cablegraph.utils.config import Config, LoggingConfig, load_config

app = typer.Typer(help="Extract cable connections from vessel wiring-diagram text.")

console = Console(color_system=None, force_terminal=False, width=120)


def find_input_files(paths: Sequence[Path], suffixes: Sequence[str]) -> List[Path]:
    """Expand files and directories into supported input files.

    Command-line order is kept; files found under a directory are sorted.
    """
    allowed = {suffix.lower() for suffix in suffixes}
    found: List[Path] = []

    for path in paths:
        if path.is_file():
            if path.suffix.lower() in allowed:
                found.append(path)
            else:
                logger.warning(f"Skipping unsupported file: {path}")
        elif path.is_dir():
            found.extend(
                sorted(p for p in path.rglob("*") if p.is_file() and p.suffix.lower() in allowed)
            )
        else:
            logger.warning(f"Path does not exist: {path}")

    # De-dup while preserving order.
    return list(dict.fromkeys(p.resolve() for p in found))


def _configure_logging(settings: LoggingConfig, verbose: bool) -> None:
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if verbose else settings.level,
    )
    if settings.file:
        log_file = Path(settings.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(log_file, rotation=settings.rotation, retention=settings.retention, level="DEBUG")


def _load(config_path: Path) -> Config:
    if config_path.exists():
        return load_config(config_path)
    logger.debug(f"No configuration at {config_path}; using defaults")
    return Config()


def _render_edge_table(edges: Sequence[Edge], *, title: str) -> None:
    table = Table(title=title)
    table.add_column("From", style="cyan")
    table.add_column("To", style="cyan")
    table.add_column("Cable ID", style="magenta")
    table.add_column("Media")
    table.add_column("Pages")
    table.add_column("Conf", justify="right")
    table.add_column("Tag")
    table.add_column("Evidence")

    for edge in edges:
        table.add_row(
            escape(edge.from_endpoint),
            escape(edge.to_endpoint),
            edge.cable_id,
            edge.media,
            ", ".join(str(page) for page in edge.page_refs),
            f"{edge.confidence:.2f}",
            edge.tag.value,
            escape("; ".join(edge.evidence[:3])),
        )

    console.print(table)


def _render_review_table(review: Sequence[ReviewItem]) -> None:
    table = Table(title="Review List")
    table.add_column("Cable ID", style="magenta")
    table.add_column("Type")
    table.add_column("Endpoint / Candidates")
    table.add_column("Pages")

    for item in review:
        detail = item.endpoint or ", ".join(item.candidates or [])
        table.add_row(
            item.cable_id,
            item.type.value,
            escape(detail) or "-",
            ", ".join(str(page) for page in item.page_refs),
        )

    console.print(table)


def _render_report(report: ExtractionReport, view: str) -> None:
    summary = report.result.summary
    console.print(
        f"[bold]{escape(report.vessel_id)}[/bold]: {summary.total_edges} paired, "
        f"{summary.total_review} in review | system-level {summary.system_level}, "
        f"internal {summary.internal}, unknown {summary.unknown}"
    )

    edges = filter_edges(report.result.edges, view)
    if edges:
        _render_edge_table(edges, title=f"Connections ({view})")
    else:
        console.print("[yellow]No connections for this view.[/yellow]")

    if report.result.review:
        _render_review_table(report.result.review)
    else:
        console.print("No items for review.")


@app.command("extract")
def extract(
    paths: List[Path] = typer.Argument(..., help="Diagram files (.pdf, .txt) or directories."),
    strict_ethernet: Optional[bool] = typer.Option(
        None,
        "--strict-ethernet/--no-strict-ethernet",
        help="Strict ethernet mode (default from config).",
        show_default=False,
    ),
    vessel_id: Optional[str] = typer.Option(None, help="Vessel identifier for the report."),
    view: Optional[str] = typer.Option(None, help="Edge view: all|system|internal."),
    json_out: Optional[Path] = typer.Option(None, "--json", help="Write the report as JSON."),
    csv_out: Optional[Path] = typer.Option(None, "--csv", help="Write connections as CSV."),
    review_out: Optional[Path] = typer.Option(
        None, "--review-md", help="Write the review list as Markdown."
    ),
    out_dir: Optional[Path] = typer.Option(
        None, "--out-dir", help="Write JSON, CSV and review exports into this directory."
    ),
    config: Path = typer.Option(Path("config/config.yaml"), help="Path to config file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
) -> None:
    """Extract paired cable connections and a review list from diagram files."""
    cfg = _load(config)
    _configure_logging(cfg.logging, verbose)

    edge_view = view or cfg.reporting.default_view
    if edge_view not in ("all", "system", "internal"):
        console.print(f"[red]Unknown view: {edge_view}[/red]")
        raise typer.Exit(code=1)

    input_files = find_input_files(paths, cfg.extraction.supported_suffixes)
    if not input_files:
        console.print("[red]No supported diagram files found.[/red]")
        raise typer.Exit(code=1)

    logger.info(f"Found {len(input_files)} diagram files to process")

    pipeline = ExtractionPipeline(cfg)
    try:
        report = pipeline.run(input_files, vessel_id=vessel_id, strict_ethernet=strict_ethernet)
    except Exception as e:
        logger.exception("Extraction failed")
        console.print(f"[red]Extraction failed: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    _render_report(report, edge_view)

    if out_dir:
        json_out = json_out or out_dir / cfg.reporting.json_filename
        csv_out = csv_out or out_dir / cfg.reporting.csv_filename
        review_out = review_out or out_dir / cfg.reporting.review_filename

    if json_out:
        export_json(report, json_out)
    if csv_out:
        export_csv(report.result.edges, csv_out)
    if review_out:
        export_review_markdown(report.result.review, review_out)


@app.command("version")
def version() -> None:
    """Show the installed version."""
    from cablegraph import __version__

    console.print(__version__)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
