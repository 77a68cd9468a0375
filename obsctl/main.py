#!/usr/bin/env python3
"""
obsctl
Command line tool to control a running OBS Studio over obs-websocket.

Architecture:
- Dispatcher: click command tree, every group and command reachable by alias
- Session: one websocket connection per invocation, opened only by commands
  that talk to OBS
- Commands: one module per OBS resource area under obsctl.commands
"""

import logging
import os
import sys
from pathlib import Path

import click
from click.shell_completion import get_completion_class

from . import __version__
from .commands import COMMANDS
from .config import (
    APP_NAME,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    CLIState,
    ObsConfig,
    StyleConfig,
    load_env_files,
)
from .dispatch import AliasedGroup
from .style import STYLE_NAMES

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {'help_option_names': ['-h', '--help']}

COMPLETION_SHELLS = ('bash', 'zsh', 'fish')


def configure_logging():
    """Configure root logging. Output goes to stderr, stdout is for command output."""
    log_level = os.environ.get('LOG_LEVEL', 'WARNING').upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


@click.group(APP_NAME, cls=AliasedGroup, context_settings=CONTEXT_SETTINGS)
@click.option('-H', '--host', envvar='OBS_HOST', default=DEFAULT_HOST, show_default=True,
              help='Host to connect to.')
@click.option('-P', '--port', envvar='OBS_PORT', type=click.IntRange(1, 65535), default=DEFAULT_PORT,
              show_default=True, help='Port to connect to.')
@click.option('-p', '--password', envvar='OBS_PASSWORD', default='', help='Password for authentication.')
@click.option('-T', '--timeout', envvar='OBS_TIMEOUT', type=click.IntRange(min=1), default=DEFAULT_TIMEOUT,
              show_default=True, help='Timeout in seconds.')
@click.option('-s', '--style', envvar='OBSCTL_STYLE', type=click.Choice(STYLE_NAMES), default=None,
              help='Style used in output.')
@click.option('-b', '--no-border', envvar='OBSCTL_STYLE_NO_BORDER', is_flag=True,
              help='Disable table border styling in output.')
@click.option('--no-color', is_flag=True,
              help='Disable colours and use plain ASCII marks. Also set by a non-empty NO_COLOR.')
@click.version_option(__version__, '-v', '--version', prog_name=APP_NAME,
                      message='%(prog)s version: %(version)s',
                      help='Print obsctl version information and quit.')
@click.pass_context
def cli(ctx: click.Context, host, port, password, timeout, style, no_border, no_color):
    """A command line tool to interact with OBS Websocket."""
    # Any non-empty NO_COLOR disables colour
    no_color = no_color or bool(os.environ.get('NO_COLOR'))
    ctx.obj = CLIState(
        obs=ObsConfig(host=host, port=port, password=password, timeout=timeout),
        style=StyleConfig(style=style or '', no_border=no_border, no_color=no_color),
    )


@cli.command('completion', aliases=('c',))
@click.argument('shell', required=False, type=click.Choice(COMPLETION_SHELLS))
@click.pass_context
def completion(ctx: click.Context, shell):
    """Generate shell completion scripts."""
    if shell is None:
        shell = Path(os.environ.get('SHELL', 'bash')).name
        if shell not in COMPLETION_SHELLS:
            raise click.UsageError(
                f"cannot detect a supported shell from $SHELL, choose one of: {', '.join(COMPLETION_SHELLS)}"
            )

    root = ctx.find_root()
    prog_name = root.info_name or APP_NAME
    complete_var = f"_{prog_name.replace('-', '_').upper()}_COMPLETE"
    comp_cls = get_completion_class(shell)
    comp = comp_cls(root.command, {}, prog_name, complete_var)
    click.echo(comp.source())


for command in COMMANDS:
    cli.add_command(command)


def main():
    """Entry point for the obsctl console script."""
    configure_logging()
    load_env_files()
    cli(prog_name=APP_NAME)


if __name__ == "__main__":
    main()
