"""Studio mode."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call


def studio_mode_enabled(client) -> bool:
    with remote_call("failed to get studio mode status"):
        return client.get_studio_mode_enabled().studio_mode_enabled


def set_studio_mode(ctx, enabled: bool):
    with remote_call(f"failed to {'enable' if enabled else 'disable'} studio mode"):
        ctx.client.set_studio_mode_enabled(enabled)
    ctx.write(f"Studio mode is now {'enabled' if enabled else 'disabled'}")


@click.group(cls=AliasedGroup, aliases=('sm',))
def studiomode():
    """Manage studio mode."""


@studiomode.command('enable', aliases=('on',))
@pass_context
def enable(ctx):
    """Enable studio mode."""
    set_studio_mode(ctx, True)


@studiomode.command('disable', aliases=('off',))
@pass_context
def disable(ctx):
    """Disable studio mode."""
    set_studio_mode(ctx, False)


@studiomode.command('toggle', aliases=('tg',))
@pass_context
def toggle(ctx):
    """Toggle studio mode."""
    set_studio_mode(ctx, not studio_mode_enabled(ctx.client))


@studiomode.command('status', aliases=('ss',))
@pass_context
def status(ctx):
    """Get studio mode status."""
    enabled = studio_mode_enabled(ctx.client)
    ctx.write(f"Studio mode is {'enabled' if enabled else 'disabled'}")
