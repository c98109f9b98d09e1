"""Main CLI entry point using Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from kubedeck import __version__
from kubedeck.models.state.app_settings import AppSettings, ConfigLoadError
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.utils.logging_config import configure_logging

app = typer.Typer(
    name="kubedeck",
    help="Terminal dashboard for browsing a Kubernetes cluster.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"kubedeck version {__version__}")
        raise typer.Exit()


def load_settings(config: Path | None, **overrides: object) -> AppSettings:
    """Load settings from ``config`` and apply command line overrides.

    A broken settings file is reported and replaced by defaults so the
    dashboard still starts.
    """
    try:
        settings = ConfigManager.load(config)
    except ConfigLoadError as exc:
        err_console.print(
            f"[yellow]warning:[/yellow] {escape(str(exc))}; using default settings"
        )
        settings = AppSettings()
    return ConfigManager.with_overrides(settings, **overrides)


@app.command()
def run(
    context: str | None = typer.Option(
        None,
        "--context",
        "-c",
        help="kubeconfig context to use (default: current context).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Settings file (default: ~/.config/kubedeck/settings.yaml).",
    ),
    log_file: Path | None = typer.Option(
        None,
        "--log-file",
        help="Write logs to this file.",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging.",
    ),
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Open the dashboard."""
    try:
        settings = load_settings(
            config,
            context=context,
            log_file=str(log_file) if log_file else None,
            log_level="DEBUG" if debug else None,
        )
    except ConfigLoadError as exc:
        err_console.print(f"[red]error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    log_path = configure_logging(
        settings.log_level,
        Path(settings.log_file).expanduser() if settings.log_file else None,
    )
    logger.debug("Logging to %s", log_path)

    from kubedeck.app import KubeDeckApp

    KubeDeckApp(settings=settings).run()


def main() -> None:
    """Console script entry point."""
    app()


__all__ = ["app", "load_settings", "main", "run"]
