"""CLI entry point for promptpath."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from promptpath import __version__
from promptpath.config import ConfigError, PromptPathConfig
from promptpath.constants import DEFAULT_STYLE
from promptpath.debug_log import debug_requested, setup_debug_logging
from promptpath.enums import PathStyle, Property
from promptpath.environment import SystemEnvironment, get_flavor
from promptpath.paths import get_config_path
from promptpath.segment import PathSegment

log = logging.getLogger(__name__)

STYLE_CHOICES = tuple(style.value for style in PathStyle)
FLAVOR_CHOICES = ("posix", "windows")

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: platform config dir, or $PROMPTPATH_CONFIG_DIR)",
)
pwd_option = click.option(
    "--pwd",
    default=None,
    help="Render this path instead of the process working directory (pass $PWD)",
)
flavor_option = click.option(
    "--flavor",
    type=click.Choice(FLAVOR_CHOICES, case_sensitive=False),
    default=None,
    help="Path rules to apply (default: the running platform)",
)
debug_option = click.option("--debug", is_flag=True, help="Log diagnostics to stderr")


def _load_config(config_path: Path | None) -> PromptPathConfig:
    try:
        return PromptPathConfig.load(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _printable(text: str) -> str:
    """Swap bytes the filesystem encoding could not decode for U+FFFD."""
    return os.fsencode(text).decode("utf-8", errors="replace")


def _build_segment(
    config: PromptPathConfig,
    *,
    style: str | None,
    pwd: str | None,
    flavor: str | None,
) -> PathSegment:
    props = config.to_properties(**{Property.STYLE.value: style})
    env = SystemEnvironment(pwd, flavor=get_flavor(flavor) if flavor else None)
    return PathSegment(props, env)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Render the working directory for a shell prompt."""
    if version:
        click.echo(f"promptpath {__version__}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(render)


@cli.command()
@click.option(
    "-s",
    "--style",
    default=None,
    help=f"Override the configured style ({', '.join(STYLE_CHOICES)})",
)
@pwd_option
@flavor_option
@config_option
@debug_option
def render(
    style: str | None,
    pwd: str | None,
    flavor: str | None,
    config_path: Path | None,
    debug: bool,
) -> None:
    """Print the path segment (no trailing newline).

    \b
    Examples:
        promptpath render
        promptpath render --style short --pwd "$PWD"
        PS1='$(promptpath render --pwd "$PWD") $ '
    """
    if debug_requested(debug):
        setup_debug_logging()

    config = _load_config(config_path)
    segment = _build_segment(config, style=style, pwd=pwd, flavor=flavor)
    # The cwd may hold undecodable bytes (surrogate-escaped); hand them back to the terminal as-is
    stdout = click.get_binary_stream("stdout")
    stdout.write(os.fsencode(segment.render()))
    stdout.flush()


@cli.command()
@pwd_option
@flavor_option
@config_option
@debug_option
def preview(
    pwd: str | None,
    flavor: str | None,
    config_path: Path | None,
    debug: bool,
) -> None:
    """Show the working directory rendered in every style."""
    if debug_requested(debug):
        setup_debug_logging()

    config = _load_config(config_path)
    configured = config.path.style or DEFAULT_STYLE

    table = Table(title="promptpath styles")
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Rendered")

    for style in STYLE_CHOICES:
        segment = _build_segment(config, style=style, pwd=pwd, flavor=flavor)
        label = f"{style} *" if style == configured else style
        table.add_row(label, Text(_printable(segment.render())))

    Console().print(table)


@cli.command()
@config_option
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
def init(config_path: Path | None, force: bool) -> None:
    """Write a config file with every default spelled out."""
    target = config_path or get_config_path()
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")

    try:
        PromptPathConfig.with_defaults().save(target)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc
    log.debug("Wrote default config to %s", target)
    click.secho(f"Wrote {target}", fg="green")


if __name__ == "__main__":
    cli()
