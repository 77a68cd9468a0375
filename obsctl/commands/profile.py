"""Profiles."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import ObsctlError, remote_call
from ..util import find_by_name


def profile_list(client):
    with remote_call("failed to get profile list"):
        return client.get_profile_list()


@click.group(cls=AliasedGroup, aliases=('p',))
def profile():
    """Manage profiles."""


@profile.command('list', aliases=('ls',))
@pass_context
def list_profiles(ctx):
    """List profiles."""
    resp = profile_list(ctx.client)

    table = ctx.style.table(('Profile Name', 'left'), ('Current', 'center'))
    for name in resp.profiles:
        table.add_row(name, ctx.mark(True) if name == resp.current_profile_name else '')
    ctx.print_table(table)


@profile.command('current', aliases=('c',))
@pass_context
def current(ctx):
    """Get current profile."""
    ctx.write("Current profile: ", ctx.highlight(profile_list(ctx.client).current_profile_name))


@profile.command('switch', aliases=('sw',))
@click.argument('name')
@pass_context
def switch(ctx, name):
    """Switch profile."""
    previous = profile_list(ctx.client).current_profile_name
    if previous == name:
        raise ObsctlError(f"already using profile {name}")

    with remote_call(f"failed to switch to profile {name}"):
        ctx.client.set_current_profile(name)
    ctx.write("Switched from profile ", ctx.highlight(previous), " to ", ctx.highlight(name))


@profile.command('create', aliases=('new',))
@click.argument('name')
@pass_context
def create(ctx, name):
    """Create profile."""
    if name in profile_list(ctx.client).profiles:
        raise ObsctlError(f"profile {name} already exists")

    with remote_call(f"failed to create profile {name}"):
        ctx.client.create_profile(name)
    ctx.write("Created profile: ", ctx.highlight(name))


@profile.command('remove', aliases=('rm',))
@click.argument('name')
@pass_context
def remove(ctx, name):
    """Remove profile."""
    resp = profile_list(ctx.client)
    find_by_name(resp.profiles, name, 'profile')
    if resp.current_profile_name == name:
        raise ObsctlError(f"cannot delete current profile {name}")

    with remote_call(f"failed to delete profile {name}"):
        ctx.client.remove_profile(name)
    ctx.write("Deleted profile: ", ctx.highlight(name))
