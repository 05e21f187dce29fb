"""Subcommands of the material-inspector CLI."""

from __future__ import annotations

import importlib

import click

# Modules under this package that define a ``cli`` command, in help order
COMMAND_MODULES = ("search", "init_config")


def load_commands() -> list[click.Command]:
    """Import each command module and return its ``cli`` command."""
    commands = []
    for name in COMMAND_MODULES:
        module = importlib.import_module(f"{__name__}.{name}")
        commands.append(module.cli)
    return commands
