"""Media inputs (media sources, VLC sources)."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..params import TIME
from ..util import format_milliseconds

MEDIA_ACTION_PREFIX = 'OBS_WEBSOCKET_MEDIA_INPUT_ACTION_'


def trigger_action(ctx, input_name: str, action: str, verb: str):
    with remote_call(f"failed to {action.lower()} media input"):
        ctx.client.trigger_media_input_action(input_name, MEDIA_ACTION_PREFIX + action)
    ctx.write(f"{verb} media input: ", ctx.highlight(input_name))


@click.group(cls=AliasedGroup, aliases=('mi',))
def media():
    """Manage media inputs."""


@media.command('cursor', aliases=('c',))
@click.argument('input_name')
@click.argument('position', required=False, type=TIME, metavar='[TIME]')
@pass_context
def cursor(ctx, input_name, position):
    """
    Get or set the cursor position of a media input.

    TIME is SS, MM:SS or HH:MM:SS, e.g. 01:30 for one minute thirty seconds.
    """
    if position is None:
        with remote_call("failed to get media input cursor"):
            current = ctx.client.get_media_input_status(input_name).media_cursor
        ctx.write(ctx.highlight(input_name), " cursor position: ", format_milliseconds(current or 0))
        return

    with remote_call("failed to set media input cursor"):
        ctx.client.set_media_input_cursor(input_name, position)
    ctx.write(
        "Set ", ctx.highlight(input_name), " cursor to ",
        ctx.highlight(format_milliseconds(position)), f" ({position} ms)",
    )


@media.command('play', aliases=('p',))
@click.argument('input_name')
@pass_context
def play(ctx, input_name):
    """Plays a media input."""
    trigger_action(ctx, input_name, 'PLAY', 'Playing')


@media.command('pause', aliases=('pa',))
@click.argument('input_name')
@pass_context
def pause(ctx, input_name):
    """Pauses a media input."""
    trigger_action(ctx, input_name, 'PAUSE', 'Pausing')


@media.command('stop', aliases=('s',))
@click.argument('input_name')
@pass_context
def stop(ctx, input_name):
    """Stops a media input."""
    trigger_action(ctx, input_name, 'STOP', 'Stopping')


@media.command('restart', aliases=('r',))
@click.argument('input_name')
@pass_context
def restart(ctx, input_name):
    """Restarts a media input."""
    trigger_action(ctx, input_name, 'RESTART', 'Restarting')
