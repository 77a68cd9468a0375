"""Streaming output."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call


def stream_active(client) -> bool:
    with remote_call("failed to get stream status"):
        return client.get_stream_status().output_active


@click.group(cls=AliasedGroup, aliases=('st',))
def stream():
    """Manage streaming."""


@stream.command('start', aliases=('s',))
@pass_context
def start(ctx):
    """Start streaming."""
    if stream_active(ctx.client):
        ctx.write("Stream is already active.")
        return

    with remote_call("failed to start streaming"):
        ctx.client.start_stream()
    ctx.write("Streaming started successfully.")


@stream.command('stop', aliases=('st',))
@pass_context
def stop(ctx):
    """Stop streaming."""
    if not stream_active(ctx.client):
        ctx.write("Stream is already inactive.")
        return

    with remote_call("failed to stop streaming"):
        ctx.client.stop_stream()
    ctx.write("Streaming stopped successfully.")


@stream.command('toggle', aliases=('tg',))
@pass_context
def toggle(ctx):
    """Toggle streaming."""
    with remote_call("failed to toggle streaming"):
        active = ctx.client.toggle_stream().output_active
    ctx.write("Streaming started successfully." if active else "Streaming stopped successfully.")


@stream.command('status', aliases=('ss',))
@pass_context
def status(ctx):
    """Get streaming status."""
    with remote_call("failed to get stream status"):
        resp = ctx.client.get_stream_status()

    ctx.write(f"Output active: {'true' if resp.output_active else 'false'}")
    if not resp.output_active:
        return

    minutes, seconds = divmod(int(resp.output_duration // 1000), 60)
    if minutes > 0:
        ctx.write(f"Output duration: {minutes} minutes and {seconds} seconds")
    else:
        ctx.write(f"Output duration: {seconds} seconds")
