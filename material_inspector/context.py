"""State shared between the root CLI group and its subcommands."""

from __future__ import annotations

import click

from material_inspector.config import Config


class Context:
    """Options the subcommands read themselves.

    Verbosity and pager choices live in ``utils.output``.
    """

    def __init__(self) -> None:
        self.config: Config | None = None
        self.quiet: bool = False


pass_context = click.make_pass_decorator(Context, ensure=True)
