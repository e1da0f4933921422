"""
Command line interface for the RE-ARC visualization builder.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import ConfigError, SiteConfig, load_config
from .errors import VisualizationError
from .render import PALETTE
from .web import BuildReport, build_site

console = Console()
app = typer.Typer(help="Render RE-ARC task files into a static HTML site.")
logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    critical = "critical"
    error = "error"
    warning = "warning"
    info = "info"
    debug = "debug"


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def _show_version(value: bool) -> None:
    if value:
        console.print(f"[bold green]rearc-viz[/] {__version__}")
        raise typer.Exit()


def _load_config_or_exit(path: Optional[Path]) -> SiteConfig:
    if path is None:
        return SiteConfig()
    try:
        return load_config(path)
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc


def _print_build_report(report: BuildReport) -> None:
    table = Table(title="Build Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


def _run_build(config: SiteConfig) -> BuildReport:
    logger.info("Building site from %s into %s", config.tasks_dir, config.output_dir)
    try:
        report = build_site(config)
    except VisualizationError as exc:
        logger.error("Build aborted: %s", exc)
        console.print(f"[bold red]Build failed:[/] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc
    _print_build_report(report)
    console.print(f"[bold green]Site written to[/] {escape(str(report.output_dir))}", soft_wrap=True)
    return report


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-v", help="Show rearc-viz version and exit.", callback=_show_version, is_eager=True
    ),
    log_level: LogLevel = typer.Option(LogLevel.info, "--log-level", case_sensitive=False),
) -> None:
    """
    Default command when no subcommand is selected.

    Without a subcommand the site is built from ./tasks into ./visualization.
    """
    _configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        _run_build(SiteConfig())


@app.command()
def build(
    tasks_dir: Optional[Path] = typer.Option(
        None,
        "--tasks-dir",
        "-t",
        help="Directory of *.json task files (default: ./tasks).",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Directory for the generated HTML (default: ./visualization).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Optional TOML file with site settings.",
        exists=True,
        dir_okay=False,
        resolve_path=True,
    ),
) -> None:
    """
    Rebuild every task page and the index.
    """
    site_config = _load_config_or_exit(config)
    overrides = {}
    if tasks_dir is not None:
        overrides["tasks_dir"] = tasks_dir
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if overrides:
        site_config = site_config.model_copy(update=overrides)
    _run_build(site_config)


@app.command()
def palette() -> None:
    """
    Show the cell color palette.
    """
    table = Table(title="Cell Palette")
    table.add_column("Value", justify="right")
    table.add_column("Name")
    table.add_column("Hex")
    table.add_column("CSS class")
    table.add_column("Swatch")
    for color in PALETTE:
        table.add_row(str(color.index), color.name, color.hex, color.css_class, f"[on {color.hex}]    [/]")
    console.print(table)


def main() -> None:
    """
    Entry-point used by the console script defined in pyproject.toml.
    """
    app()
