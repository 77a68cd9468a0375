"""Scene items: listing, visibility and transforms."""

from typing import Optional

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import current_program_scene, find_by_name


def resolve_scene_item(client, scene_name: str, item_name: str, group: Optional[str] = None) -> tuple[str, int]:
    """
    Resolve an item name to the (scene, id) pair OBS addresses it by.

    Items inside a group are addressed through the group, which OBS treats
    as a scene of its own.

    Raises:
        NotFoundError: if the item is not in the scene (or group).
    """
    owner = group or scene_name
    with remote_call(f"failed to get scene items of '{owner}'"):
        if group:
            items = client.get_group_scene_item_list(group).scene_items
        else:
            items = client.get_scene_item_list(scene_name).scene_items

    item = find_by_name(items, item_name, 'scene item', key=lambda i: i['sourceName'])
    return owner, item['sceneItemId']


def describe_location(scene_name: str, group: Optional[str]) -> str:
    if group:
        return f"group '{group}'"
    return f"scene '{scene_name}'"


def item_enabled(client, scene_name: str, item_id: int) -> bool:
    with remote_call(f"failed to get visibility of scene item {item_id}"):
        return client.get_scene_item_enabled(scene_name, item_id).scene_item_enabled


def set_item_enabled(client, scene_name: str, item_id: int, enabled: bool):
    with remote_call(f"failed to {'show' if enabled else 'hide'} scene item {item_id}"):
        client.set_scene_item_enabled(scene_name, item_id, enabled)


@click.group(cls=AliasedGroup, aliases=('si',))
def sceneitem():
    """Manage scene items."""


@sceneitem.command('list', aliases=('ls',))
@click.argument('scene_name', required=False, default='')
@click.option('--uuid', is_flag=True, help='Display UUIDs of scene items.')
@pass_context
def list_items(ctx, scene_name, uuid):
    """List all scene items. Defaults to the current scene."""
    if not scene_name:
        scene_name = current_program_scene(ctx.client)

    with remote_call("failed to get scene item list"):
        items = ctx.client.get_scene_item_list(scene_name).scene_items

    if not items:
        ctx.write("No scene items found in scene '", ctx.highlight(scene_name), "'.")
        return

    columns = [('Item ID', 'center'), ('Item Name', 'left'), ('In Group', 'center'), ('Enabled', 'center')]
    if uuid:
        columns.append(('UUID', 'center'))
    table = ctx.style.table(*columns)

    def add_row(item, group_name='', enabled=None):
        row = [
            str(item['sceneItemId']),
            item['sourceName'],
            group_name,
            ctx.mark(item['sceneItemEnabled'] if enabled is None else enabled),
        ]
        if uuid:
            row.append(item.get('sourceUuid', ''))
        table.add_row(*row)

    for item in sorted(items, key=lambda i: i['sceneItemId']):
        if not item.get('isGroup'):
            add_row(item)
            continue

        group_name = item['sourceName']
        with remote_call(f"failed to get group scene item list for '{group_name}'"):
            children = ctx.client.get_group_scene_item_list(group_name).scene_items
        for child in sorted(children, key=lambda i: i['sceneItemId']):
            # A child is only visible when its group is
            add_row(child, group_name, item['sceneItemEnabled'] and child['sceneItemEnabled'])

    ctx.print_table(table)


def item_arguments(f):
    """Arguments shared by every command that addresses one scene item."""
    f = click.option('--group', default=None, help='Parent group name.')(f)
    f = click.argument('item_name')(f)
    f = click.argument('scene_name')(f)
    return f


@sceneitem.command('show', aliases=('sh',))
@item_arguments
@pass_context
def show(ctx, scene_name, item_name, group):
    """Show scene item."""
    owner, item_id = resolve_scene_item(ctx.client, scene_name, item_name, group)
    set_item_enabled(ctx.client, owner, item_id, True)
    ctx.write(
        "Scene item '", ctx.highlight(item_name), f"' in {describe_location(scene_name, group)} is now visible."
    )


@sceneitem.command('hide', aliases=('h',))
@item_arguments
@pass_context
def hide(ctx, scene_name, item_name, group):
    """Hide scene item."""
    owner, item_id = resolve_scene_item(ctx.client, scene_name, item_name, group)
    set_item_enabled(ctx.client, owner, item_id, False)
    ctx.write(
        "Scene item '", ctx.highlight(item_name), f"' in {describe_location(scene_name, group)} is now hidden."
    )


@sceneitem.command('toggle', aliases=('tg',))
@item_arguments
@pass_context
def toggle(ctx, scene_name, item_name, group):
    """Toggle scene item."""
    owner, item_id = resolve_scene_item(ctx.client, scene_name, item_name, group)
    enabled = not item_enabled(ctx.client, owner, item_id)
    set_item_enabled(ctx.client, owner, item_id, enabled)
    ctx.write(
        "Scene item '", ctx.highlight(item_name),
        f"' in {describe_location(scene_name, group)} is now {'visible' if enabled else 'hidden'}.",
    )


@sceneitem.command('visible', aliases=('v',))
@item_arguments
@pass_context
def visible(ctx, scene_name, item_name, group):
    """Get scene item visibility."""
    owner, item_id = resolve_scene_item(ctx.client, scene_name, item_name, group)
    enabled = item_enabled(ctx.client, owner, item_id)
    ctx.write(
        "Scene item '", ctx.highlight(item_name),
        f"' in {describe_location(scene_name, group)} is {'visible' if enabled else 'hidden'}.",
    )


# option name -> transform key; applied only when given
TRANSFORM_FIELDS = {
    'alignment': 'alignment',
    'bounds_alignment': 'boundsAlignment',
    'crop_bottom': 'cropBottom',
    'crop_left': 'cropLeft',
    'crop_right': 'cropRight',
    'crop_top': 'cropTop',
    'position_x': 'positionX',
    'position_y': 'positionY',
    'rotation': 'rotation',
    'scale_x': 'scaleX',
    'scale_y': 'scaleY',
}


@sceneitem.command('transform', aliases=('t',))
@item_arguments
@click.option('--alignment', type=int, help='Alignment of the scene item.')
@click.option('--bounds-alignment', type=int, help='Bounds alignment of the scene item.')
@click.option('--bounds-height', type=float, default=1.0, show_default=True, help='Bounds height of the scene item.')
@click.option('--bounds-type', default='OBS_BOUNDS_NONE', show_default=True, help='Bounds type of the scene item.')
@click.option('--bounds-width', type=float, default=1.0, show_default=True, help='Bounds width of the scene item.')
@click.option('--crop-to-bounds', is_flag=True, help='Whether to crop the scene item to bounds.')
@click.option('--crop-bottom', type=float, help='Crop bottom value of the scene item.')
@click.option('--crop-left', type=float, help='Crop left value of the scene item.')
@click.option('--crop-right', type=float, help='Crop right value of the scene item.')
@click.option('--crop-top', type=float, help='Crop top value of the scene item.')
@click.option('--position-x', type=float, help='X position of the scene item.')
@click.option('--position-y', type=float, help='Y position of the scene item.')
@click.option('--rotation', type=float, help='Rotation of the scene item.')
@click.option('--scale-x', type=float, help='X scale of the scene item.')
@click.option('--scale-y', type=float, help='Y scale of the scene item.')
@pass_context
def transform(ctx, scene_name, item_name, group, bounds_height, bounds_type, bounds_width, crop_to_bounds,
              **values):
    """Transform scene item."""
    owner, item_id = resolve_scene_item(ctx.client, scene_name, item_name, group)

    with remote_call(f"failed to get transform of scene item '{item_name}'"):
        current = ctx.client.get_scene_item_transform(owner, item_id).scene_item_transform

    updated = dict(current)
    for option, key in TRANSFORM_FIELDS.items():
        if values.get(option) is not None:
            updated[key] = values[option]
    updated['boundsHeight'] = bounds_height
    updated['boundsType'] = bounds_type
    updated['boundsWidth'] = bounds_width
    if crop_to_bounds:
        updated['cropToBounds'] = True

    with remote_call(f"failed to transform scene item '{item_name}'"):
        ctx.client.set_scene_item_transform(owner, item_id, updated)
    ctx.write(
        "Scene item '", ctx.highlight(item_name), f"' in {describe_location(scene_name, group)} transformed."
    )
