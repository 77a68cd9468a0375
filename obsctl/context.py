"""
Execution context handed to every leaf command.
"""

import functools
import logging
import sys
from dataclasses import dataclass, field
from typing import Any, TextIO

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .client import OBSSession
from .config import CLIState
from .style import Style, style_from_flag
from .util import enabled_mark

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Context:
    """
    Dependencies of one leaf command: the OBS client, where to write, and how.

    The client is shared with the session that opened it; commands never
    close it themselves.
    """

    client: Any
    out: TextIO
    style: Style = field(default_factory=Style)
    console: Console = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        console = Console(
            file=self.out,
            highlight=False,
            soft_wrap=True,
            no_color=self.style.no_color,
        )
        object.__setattr__(self, 'console', console)

    def write(self, *parts):
        """
        Write one line. Parts are plain strings or rich Text.

        Strings are never interpreted as markup, so names like "[Mic]" print
        as they are.
        """
        self.console.print(Text.assemble(*parts))

    def highlight(self, text) -> Text:
        return self.style.highlight(text)

    def mark(self, enabled: bool) -> str:
        return enabled_mark(enabled, self.style.no_color)

    def print_table(self, table: Table):
        self.console.print(table)


def pass_context(f):
    """
    Decorator for leaf commands that talk to OBS.

    Opens the session when the command is actually invoked (so help,
    version and completion never connect) and registers it with the root
    click context, which closes it once the command finishes or fails.
    The wrapped function receives a Context as its first argument.
    """

    @click.pass_context
    def new_func(click_ctx: click.Context, *args, **kwargs):
        state = click_ctx.find_object(CLIState) or CLIState()
        session = OBSSession(state.obs)
        client = click_ctx.find_root().with_resource(session)

        ctx = Context(
            client=client,
            out=sys.stdout,
            style=style_from_flag(state.style.style, state.style.no_border, state.style.no_color),
        )
        logger.debug(f"[COMMAND] Running {click_ctx.command_path}")
        return f(ctx, *args, **kwargs)

    return functools.update_wrapper(new_func, f)
