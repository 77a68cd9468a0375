"""Replay buffer output."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call


@click.group(cls=AliasedGroup, aliases=('rb',))
def replaybuffer():
    """Manage replay buffer."""


@replaybuffer.command('start', aliases=('s',))
@pass_context
def start(ctx):
    """Start replay buffer."""
    with remote_call("failed to start replay buffer"):
        ctx.client.start_replay_buffer()
    ctx.write("Replay buffer started.")


@replaybuffer.command('stop', aliases=('st',))
@pass_context
def stop(ctx):
    """Stop replay buffer."""
    with remote_call("failed to stop replay buffer"):
        ctx.client.stop_replay_buffer()
    ctx.write("Replay buffer stopped.")


@replaybuffer.command('toggle', aliases=('tg',))
@pass_context
def toggle(ctx):
    """Toggle replay buffer."""
    with remote_call("failed to toggle replay buffer"):
        active = ctx.client.toggle_replay_buffer().output_active
    ctx.write("Replay buffer is now active." if active else "Replay buffer is now inactive.")


@replaybuffer.command('status', aliases=('ss',))
@pass_context
def status(ctx):
    """Get replay buffer status."""
    with remote_call("failed to get replay buffer status"):
        active = ctx.client.get_replay_buffer_status().output_active
    ctx.write("Replay buffer is active." if active else "Replay buffer is not active.")


@replaybuffer.command('save', aliases=('sv',))
@pass_context
def save(ctx):
    """Save replay buffer."""
    with remote_call("failed to save replay buffer"):
        ctx.client.save_replay_buffer()
    ctx.write("Replay buffer saved.")
