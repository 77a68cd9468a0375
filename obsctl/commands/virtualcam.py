"""Virtual camera output."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call


@click.group(cls=AliasedGroup, aliases=('vc',))
def virtualcam():
    """Manage virtual camera."""


@virtualcam.command('start', aliases=('s',))
@pass_context
def start(ctx):
    """Start virtual camera."""
    with remote_call("failed to start virtual camera"):
        ctx.client.start_virtual_cam()
    ctx.write("Virtual camera started.")


@virtualcam.command('stop', aliases=('st',))
@pass_context
def stop(ctx):
    """Stop virtual camera."""
    with remote_call("failed to stop virtual camera"):
        ctx.client.stop_virtual_cam()
    ctx.write("Virtual camera stopped.")


@virtualcam.command('toggle', aliases=('tg',))
@pass_context
def toggle(ctx):
    """Toggle virtual camera."""
    with remote_call("failed to toggle virtual camera"):
        active = ctx.client.toggle_virtual_cam().output_active
    ctx.write("Virtual camera is now active." if active else "Virtual camera is now inactive.")


@virtualcam.command('status', aliases=('ss',))
@pass_context
def status(ctx):
    """Get virtual camera status."""
    with remote_call("failed to get virtual camera status"):
        active = ctx.client.get_virtual_cam_status().output_active
    ctx.write("Virtual camera is active." if active else "Virtual camera is inactive.")
