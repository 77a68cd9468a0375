"""Groups are scene items that contain other scene items."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import current_program_scene, find_by_name


def find_group(client, scene_name: str, group_name: str) -> dict:
    """
    Raises:
        NotFoundError: if the scene has no group of that name.
    """
    with remote_call(f"failed to get scene item list of '{scene_name}'"):
        items = client.get_scene_item_list(scene_name).scene_items
    return find_by_name(
        items, group_name, 'group',
        key=lambda item: item['sourceName'],
        where=lambda item: item.get('isGroup'),
    )


def set_group_enabled(ctx, scene_name: str, group_name: str, enabled: bool):
    item = find_group(ctx.client, scene_name, group_name)
    with remote_call(f"failed to {'show' if enabled else 'hide'} group '{group_name}'"):
        ctx.client.set_scene_item_enabled(scene_name, item['sceneItemId'], enabled)
    ctx.write("Group ", ctx.highlight(group_name), f" is now {'shown' if enabled else 'hidden'}.")


@click.group(cls=AliasedGroup, aliases=('g',))
def group():
    """Manage groups."""


@group.command('list', aliases=('ls',))
@click.argument('scene_name', required=False, default='')
@pass_context
def list_groups(ctx, scene_name):
    """List all groups. Defaults to the current scene."""
    if not scene_name:
        scene_name = current_program_scene(ctx.client)

    with remote_call("failed to get scene item list"):
        items = ctx.client.get_scene_item_list(scene_name).scene_items

    table = ctx.style.table(('ID', 'center'), ('Group Name', 'left'), ('Enabled', 'center'))
    for item in items:
        if item.get('isGroup'):
            table.add_row(str(item['sceneItemId']), item['sourceName'], ctx.mark(item['sceneItemEnabled']))
    ctx.print_table(table)


@group.command('show', aliases=('sh',))
@click.argument('scene_name')
@click.argument('group_name')
@pass_context
def show(ctx, scene_name, group_name):
    """Show group."""
    set_group_enabled(ctx, scene_name, group_name, True)


@group.command('hide', aliases=('h',))
@click.argument('scene_name')
@click.argument('group_name')
@pass_context
def hide(ctx, scene_name, group_name):
    """Hide group."""
    set_group_enabled(ctx, scene_name, group_name, False)


@group.command('toggle', aliases=('tg',))
@click.argument('scene_name')
@click.argument('group_name')
@pass_context
def toggle(ctx, scene_name, group_name):
    """Toggle group."""
    item = find_group(ctx.client, scene_name, group_name)
    enabled = not item['sceneItemEnabled']
    with remote_call(f"failed to toggle group '{group_name}'"):
        ctx.client.set_scene_item_enabled(scene_name, item['sceneItemId'], enabled)
    ctx.write("Group ", ctx.highlight(group_name), f" is now {'shown' if enabled else 'hidden'}.")


@group.command('status', aliases=('ss',))
@click.argument('scene_name')
@click.argument('group_name')
@pass_context
def status(ctx, scene_name, group_name):
    """Get group status."""
    item = find_group(ctx.client, scene_name, group_name)
    ctx.write("Group ", ctx.highlight(group_name), f" is {'shown' if item['sceneItemEnabled'] else 'hidden'}.")
