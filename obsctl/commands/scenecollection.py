"""Scene collections."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import ObsctlError, remote_call


def scene_collection_list(client):
    with remote_call("failed to get scene collection list"):
        return client.get_scene_collection_list()


@click.group(cls=AliasedGroup, aliases=('scn',))
def scenecollection():
    """Manage scene collections."""


@scenecollection.command('list', aliases=('ls',))
@pass_context
def list_collections(ctx):
    """List scene collections."""
    table = ctx.style.table(('Scene Collection Name', 'left'))
    for name in scene_collection_list(ctx.client).scene_collections:
        table.add_row(name)
    ctx.print_table(table)


@scenecollection.command('current', aliases=('c',))
@pass_context
def current(ctx):
    """Get current scene collection."""
    ctx.write(scene_collection_list(ctx.client).current_scene_collection_name)


@scenecollection.command('switch', aliases=('sw',))
@click.argument('name')
@pass_context
def switch(ctx, name):
    """Switch scene collection."""
    if scene_collection_list(ctx.client).current_scene_collection_name == name:
        raise ObsctlError(f"scene collection {name} is already active")

    with remote_call(f"failed to switch scene collection {name}"):
        ctx.client.set_current_scene_collection(name)
    ctx.write("Switched to scene collection: ", ctx.highlight(name))


@scenecollection.command('create', aliases=('new',))
@click.argument('name')
@pass_context
def create(ctx, name):
    """Create scene collection."""
    with remote_call(f"failed to create scene collection {name}"):
        ctx.client.create_scene_collection(name)
    ctx.write("Created scene collection: ", ctx.highlight(name))
