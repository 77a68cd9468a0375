"""Scene listing and switching."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import current_program_scene


@click.group(cls=AliasedGroup, aliases=('sc',))
def scene():
    """Manage scenes."""


@scene.command('list', aliases=('ls',))
@click.option('--uuid', is_flag=True, help='Display UUIDs of scenes.')
@pass_context
def list_scenes(ctx, uuid):
    """List all scenes."""
    with remote_call("failed to get scene list"):
        scenes = ctx.client.get_scene_list().scenes
    current = current_program_scene(ctx.client)

    columns = [('Scene Name', 'left'), ('Active', 'center')]
    if uuid:
        columns.append(('UUID', 'left'))
    table = ctx.style.table(*columns)

    # OBS lists scenes bottom-up
    for item in reversed(scenes):
        name = item['sceneName']
        row = [name, ctx.mark(True) if name == current else '']
        if uuid:
            row.append(item.get('sceneUuid', ''))
        table.add_row(*row)
    ctx.print_table(table)


@scene.command('current', aliases=('c',))
@click.option('--preview', is_flag=True, help='Preview scene.')
@pass_context
def current(ctx, preview):
    """Get the current scene."""
    if preview:
        with remote_call("failed to get current preview scene"):
            name = ctx.client.get_current_preview_scene().current_preview_scene_name
    else:
        name = current_program_scene(ctx.client)
    ctx.write(name)


@scene.command('switch', aliases=('sw',))
@click.argument('new_scene')
@click.option('--preview', is_flag=True, help='Preview scene.')
@pass_context
def switch(ctx, new_scene, preview):
    """Switch to a scene."""
    if preview:
        with remote_call(f"failed to switch preview scene to {new_scene}"):
            ctx.client.set_current_preview_scene(new_scene)
        ctx.write("Switched to preview scene: ", ctx.highlight(new_scene))
    else:
        with remote_call(f"failed to switch program scene to {new_scene}"):
            ctx.client.set_current_program_scene(new_scene)
        ctx.write("Switched to program scene: ", ctx.highlight(new_scene))
