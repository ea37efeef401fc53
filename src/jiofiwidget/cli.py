"""JioFi battery widget CLI application.

This module provides the command-line interface for the widget: the
periodic refresh loop, one-shot status queries, and configuration
utilities.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Final

import typer
import yaml

from jiofiwidget.controller import BatteryWidget
from jiofiwidget.display.protocols import WidgetSurface
from jiofiwidget.display.render import ConsoleSurface, HtmlFileSurface, PngFileSurface
from jiofiwidget.scheduling import Scheduler
from jiofiwidget.settings.application import AppPaths
from jiofiwidget.settings.user import UserSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="JioFi battery widget CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "jiofiwidget.cli"

# Options for the main commands
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
ONCE_OPTION = typer.Option(False, "--once", "-1", help="Run one cycle then exit")
OUTPUT_DIR_OPTION = typer.Option(
    None, "--output-dir", "-o", file_okay=False, help="Where widget.html/widget.png are written"
)
JSON_OPTION = typer.Option(False, "--json", help="Print the full reading as JSON")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def load_settings(config: Path | None) -> UserSettings:
    """Load settings for a command, exiting with code 1 on bad config."""
    try:
        return UserSettings.load_or_default(config)
    except (FileNotFoundError, RuntimeError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def build_surfaces(settings: UserSettings, output_dir: Path | None = None) -> list[WidgetSurface]:
    """Create the HTML, PNG and console surfaces for ``run``."""
    paths = AppPaths(output_dir=output_dir or settings.output_dir)
    return [
        HtmlFileSurface(paths.html_path, settings),
        PngFileSurface(paths.png_path, settings),
        ConsoleSurface(settings),
    ]


@app.command()
def run(
    config: Path | None = CONFIG_OPTION,
    once: bool = ONCE_OPTION,
    output_dir: Path | None = OUTPUT_DIR_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Run the widget refresh loop."""
    configure_logging(debug)
    settings = load_settings(config)

    with BatteryWidget(settings, surfaces=build_surfaces(settings, output_dir)) as widget:
        Scheduler(widget).run(once=once)


@app.command()
def status(
    config: Path | None = CONFIG_OPTION,
    as_json: bool = JSON_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Query the router once and print its battery status."""
    configure_logging(debug)
    settings = load_settings(config)

    with BatteryWidget(settings) as widget:
        reading = widget.refresh_now()

    if as_json:
        typer.echo(reading.model_dump_json(indent=2))
    elif reading.success:
        typer.echo(reading.summary)
    else:
        typer.secho(reading.summary, fg=typer.colors.RED, err=True)

    if not reading.success:
        raise typer.Exit(code=1)


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        UserSettings.load(file)
        typer.echo("✅ Config valid")
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("init")
def init_config(dst: Path = DST_ARGUMENT):
    """Write a config file populated with the default settings."""
    if dst.exists():
        typer.secho(f"{dst} already exists", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    data = UserSettings().model_dump(mode="json")
    dst.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
