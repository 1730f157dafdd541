"""Command line entry point."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from kubedeck.constants.limits import REFRESH_RATE_MIN
from kubedeck.controllers.cluster.controller import ClusterController
from kubedeck.controllers.kinds import lookup_kind
from kubedeck.models.state.app_settings import AppSettings, ConfigLoadError
from kubedeck.models.state.config_manager import ConfigManager
from kubedeck.utils.logging_setup import configure_logging
from kubedeck.utils.paths import log_file_path

logger = logging.getLogger(__name__)

cli = typer.Typer(help="Terminal dashboard for pods, port-forwards and HTTP benchmarks.", add_completion=False)


def load_settings(
    context: Optional[str] = None,
    namespace: Optional[str] = None,
    refresh: Optional[float] = None,
    log_level: Optional[str] = None,
) -> AppSettings:
    """Persisted settings with command line overrides applied."""
    try:
        settings = ConfigManager.load()
    except ConfigLoadError as exc:
        typer.echo(f"Ignoring settings file: {exc}", err=True)
        settings = AppSettings()

    overrides: dict[str, object] = {}
    if context:
        overrides["current_context"] = context
        overrides["current_cluster"] = ""
    if namespace is not None:
        overrides["namespace"] = namespace
    if refresh is not None:
        overrides["refresh_rate"] = refresh
    if log_level:
        overrides["log_level"] = log_level
    if overrides:
        settings = AppSettings.model_validate({**settings.model_dump(), **overrides})
    if not settings.current_context:
        settings.current_context = ClusterController.resolve_current_context() or ""
    return settings


@cli.command()
def main(
    context: Optional[str] = typer.Option(None, "--context", help="kubeconfig context to use."),
    namespace: Optional[str] = typer.Option(
        None, "--namespace", "-n", help="Namespace to show; 'all' or '*' for every namespace."
    ),
    refresh: Optional[float] = typer.Option(
        None, "--refresh", "-r", min=REFRESH_RATE_MIN, help="Table refresh rate in seconds."
    ),
    command: str = typer.Option("pods", "--command", "-c", help="Resource to show first (po, svc, pf, be)."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Log level written to the log file."),
) -> None:
    """Launch KubeDeck."""
    if lookup_kind(command) is None:
        typer.echo(f"Unknown resource {command!r}", err=True)
        raise typer.Exit(2)

    settings = load_settings(context, namespace, refresh, log_level)
    log_file = configure_logging(settings.log_level, log_file_path())
    logger.info(
        "Starting KubeDeck (context=%s, namespace=%s, log=%s)",
        settings.current_context or "-", settings.namespace, log_file,
    )

    from kubedeck.app import KubeDeckApp

    KubeDeckApp(settings=settings, command=command).run()


def run() -> None:
    """Console script entry point."""
    cli()


__all__ = ["cli", "load_settings", "main", "run"]
