"""Command-line interface for material-inspector."""

from __future__ import annotations

import inspect
import os
from pathlib import Path

import click

from material_inspector import __version__
from material_inspector.config import load_config
from material_inspector.context import Context
from material_inspector.utils.output import (
    error,
    set_color,
    set_pager,
    set_verbosity,
    warning,
)


def _query_help() -> str:
    from material_inspector.search import parser

    return parser.__doc__ or ""


def _manifest_help() -> str:
    from material_inspector.textures import manifest

    return manifest.__doc__ or ""


# Topic name -> function returning its text
HELP_TOPICS = {
    "query": _query_help,
    "manifest": _manifest_help,
}


@click.group()
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=False, path_type=Path),
    help="Path to config file (default: ~/.config/material-inspector/config.toml)",
)
@click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable colored output",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Show load and limit details",
)
@click.option(
    "--debug",
    is_flag=True,
    default=False,
    help="Also print the effective filters (implies --verbose)",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Print only results and errors (no titles, warnings or no-match notes)",
)
@click.option(
    "--pager/--no-pager",
    default=None,
    help="Force pager on/off for result tables (default: auto-detect)",
)
@click.version_option(version=__version__, prog_name="material-inspector")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Path | None,
    no_color: bool,
    verbose: bool,
    debug: bool,
    quiet: bool,
    pager: bool | None,
) -> None:
    """material-inspector: Browse and filter the textures used by a material.

    Loads a material manifest (JSON) listing the material's texture slots
    and filters them with a small search language: comma for AND, pipe for
    OR, ! for NOT, and resolution comparisons like >2048 or 1024<.

    Configuration is loaded from ~/.config/material-inspector/config.toml by
    default. Use --config to specify an alternative configuration file.

    Examples:

        # Linear textures larger than 1024 pixels
        material-inspector search rock.json "linear,>1024"

        # Search syntax and manifest format
        material-inspector help query
        material-inspector help manifest
    """
    app_ctx = ctx.ensure_object(Context)
    app_ctx.quiet = quiet

    set_verbosity(verbose=verbose, debug=debug)
    set_pager(pager)

    disable_color = no_color or os.environ.get("NO_COLOR") is not None
    if disable_color:
        set_color(False)

    try:
        loaded_config, warnings = load_config(config)
    except Exception as e:
        error(str(e))
        ctx.exit(1)
        return

    app_ctx.config = loaded_config
    if not disable_color and not loaded_config.colored_output:
        set_color(False)

    if not quiet:
        for warn in warnings:
            warning(warn)


@cli.command("help")
@click.argument("topic", required=False)
@click.pass_context
def help_cmd(ctx: click.Context, topic: str | None) -> None:
    """Show help for a command or a topic (query, manifest)."""
    root_ctx = ctx.parent or ctx
    if topic is None:
        click.echo(cli.get_help(root_ctx))
        click.echo(f"\nTopics: {', '.join(HELP_TOPICS)}")
        return

    if topic in HELP_TOPICS:
        click.echo(inspect.cleandoc(HELP_TOPICS[topic]()))
        return

    cmd = cli.get_command(ctx, topic)
    if cmd is None:
        error(
            f"Unknown command or topic: {topic}",
            hint=f"Topics: {', '.join(HELP_TOPICS)}",
        )
        ctx.exit(1)
        return
    click.echo(cmd.get_help(click.Context(cmd, info_name=topic, parent=root_ctx)))


def register_commands() -> None:
    """Attach the subcommands to the root group."""
    from material_inspector.commands import load_commands

    for command in load_commands():
        cli.add_command(command)


register_commands()
