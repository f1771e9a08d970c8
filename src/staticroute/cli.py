"""CLI interface for staticroute.

Command-line tool for serving a static site directory.
"""

import logging
from pathlib import Path

import click

from staticroute.config import Config
from staticroute.core.paths import RequestPath
from staticroute.core.resolution import build_plan
from staticroute.core.types import Mode

MODE_CHOICES = ["normal", "pretty-url", "spa"]


@click.group()
def cli() -> None:
    """staticroute - serve static sites with pretty URLs or SPA fallback."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover staticroute.toml)",
)
@click.option(
    "--root",
    "-r",
    "root_dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Site root directory (overrides config)",
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice(MODE_CHOICES, case_sensitive=False),
    default=None,
    help="Serving mode (overrides config, default: normal)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--follow-symlinks/--no-follow-symlinks",
    default=None,
    help="Allow symlinks pointing outside the root (overrides config, default: disabled)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every not-found path)",
)
def serve(
    config_path: Path | None,
    root_dir: Path | None,
    mode: str | None,
    host: str | None,
    port: int | None,
    follow_symlinks: bool | None,
    verbose: bool,
) -> None:
    """Start the static file server."""
    from staticroute.server import run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            root_dir=root_dir,
            mode=Mode.parse(mode) if mode is not None else None,
            follow_symlinks=follow_symlinks,
        )
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Root directory: {config.site.root_dir}")
    click.echo(f"Mode: {config.site.mode.value}")
    if config.site.not_found_page is not None:
        click.echo(f"Not-found page: {config.site.not_found_page}")

    try:
        run_server(config)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.argument("path")
@click.option(
    "--mode",
    "-m",
    type=click.Choice(MODE_CHOICES, case_sensitive=False),
    default="normal",
    show_default=True,
    help="Serving mode",
)
def resolve(path: str, mode: str) -> None:
    """Show which files would be tried for a request PATH."""
    request_path = RequestPath.parse(path)
    plan = build_plan(Mode.parse(mode), request_path)

    click.echo(f"Request: {request_path}")
    for attempt, step in enumerate(plan.attempts(), start=1):
        label = "Candidate" if attempt == 1 else "Fallback"
        click.echo(f"{label}: {step.candidate}")
        if step.redirect is not None:
            click.echo(f"  on success: 308 -> {step.redirect}")
