"""Inputs: creation, listing, mute state, volume and capture devices."""

import logging

import click
from obsws_python.error import OBSSDKRequestError

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import ObsctlError, remote_call
from ..params import VOLUME
from ..util import current_program_scene, find_by_name, find_device, snake_case_to_title_case

logger = logging.getLogger(__name__)

# OBS answers GetInputMute with this code for inputs without audio
NO_AUDIO_STATUS = 604

# flag -> substring of the input kind it selects
KIND_FILTERS = {
    'input': 'input',
    'output': 'output',
    'colour': 'color',
    'ffmpeg': 'ffmpeg',
    'vlc': 'vlc',
}


def mute_mark(ctx, input_name: str) -> str:
    with remote_call(f"failed to get input mute state of {input_name}"):
        try:
            muted = ctx.client.get_input_mute(input_name).input_muted
        except OBSSDKRequestError as e:
            if e.code == NO_AUDIO_STATUS:
                return 'N/A'
            raise
    return ctx.mark(muted)


@click.group('input', cls=AliasedGroup, aliases=('i',))
def input_group():
    """Manage inputs."""


@input_group.command('create', aliases=('c',))
@click.argument('name')
@click.argument('kind')
@pass_context
def create(ctx, name, kind):
    """Create input in the current scene."""
    scene_name = current_program_scene(ctx.client)
    with remote_call(f"failed to create input {name}"):
        ctx.client.create_input(scene_name, name, kind, {}, True)
    ctx.write("Created input: ", ctx.highlight(name), f" ({kind}) in scene ", ctx.highlight(scene_name))


@input_group.command('delete', aliases=('d',))
@click.argument('name')
@pass_context
def delete(ctx, name):
    """Delete input."""
    with remote_call("failed to delete input"):
        ctx.client.remove_input(name)
    ctx.write("Deleted ", ctx.highlight(name))


@input_group.command('kinds', aliases=('k',))
@pass_context
def kinds(ctx):
    """List input kinds."""
    with remote_call("failed to get input kinds"):
        input_kinds = ctx.client.get_input_kind_list(False).input_kinds

    table = ctx.style.table(('Kind', 'left'))
    for kind in input_kinds:
        table.add_row(kind)
    ctx.print_table(table)


@input_group.command('list', aliases=('ls',))
@click.option('-i', '--input', 'inputs', is_flag=True, help='List all inputs.')
@click.option('-o', '--output', is_flag=True, help='List all outputs.')
@click.option('-c', '--colour', is_flag=True, help='List all colour sources.')
@click.option('-f', '--ffmpeg', is_flag=True, help='List all ffmpeg sources.')
@click.option('-v', '--vlc', is_flag=True, help='List all VLC sources.')
@click.option('-u', '--uuid', is_flag=True, help='Display UUIDs of inputs.')
@pass_context
def list_inputs(ctx, inputs, output, colour, ffmpeg, vlc, uuid):
    """List all inputs, optionally only those of the selected kinds."""
    selected = {'input': inputs, 'output': output, 'colour': colour, 'ffmpeg': ffmpeg, 'vlc': vlc}
    keywords = [KIND_FILTERS[flag] for flag, enabled in selected.items() if enabled]

    with remote_call("failed to get input list"):
        all_inputs = ctx.client.get_input_list().inputs

    columns = [('Input Name', 'left'), ('Kind', 'left'), ('Muted', 'center')]
    if uuid:
        columns.append(('UUID', 'left'))
    table = ctx.style.table(*columns)

    for item in sorted(all_inputs, key=lambda i: i['inputName']):
        kind = item['inputKind']
        if keywords and not any(keyword in kind for keyword in keywords):
            continue

        row = [item['inputName'], snake_case_to_title_case(kind), mute_mark(ctx, item['inputName'])]
        if uuid:
            row.append(item.get('inputUuid', ''))
        table.add_row(*row)
    ctx.print_table(table)


@input_group.command('mute', aliases=('m',))
@click.argument('input_name')
@pass_context
def mute(ctx, input_name):
    """Mute input."""
    with remote_call("failed to mute input"):
        ctx.client.set_input_mute(input_name, True)
    ctx.write("Muted input: ", ctx.highlight(input_name))


@input_group.command('unmute', aliases=('um',))
@click.argument('input_name')
@pass_context
def unmute(ctx, input_name):
    """Unmute input."""
    with remote_call("failed to unmute input"):
        ctx.client.set_input_mute(input_name, False)
    ctx.write("Unmuted input: ", ctx.highlight(input_name))


@input_group.command('toggle', aliases=('tg',))
@click.argument('input_name')
@pass_context
def toggle(ctx, input_name):
    """Toggle input mute state."""
    with remote_call("failed to get input mute state"):
        muted = not ctx.client.get_input_mute(input_name).input_muted
    with remote_call("failed to toggle input mute state"):
        ctx.client.set_input_mute(input_name, muted)
    ctx.write("Muted input: " if muted else "Unmuted input: ", ctx.highlight(input_name))


@input_group.command('show', aliases=('s',))
@click.argument('name')
@click.option('--verbose', is_flag=True, help='Also list every device the input can use.')
@pass_context
def show(ctx, name, verbose):
    """Show input details."""
    with remote_call("failed to get input list"):
        all_inputs = ctx.client.get_input_list().inputs
    item = find_by_name(all_inputs, name, 'input', key=lambda i: i['inputName'])

    with remote_call(f"failed to get input settings of {name}"):
        settings = ctx.client.get_input_settings(name).input_settings
    device = find_device(ctx.client, name, settings)

    table = ctx.style.table(('Input Name', 'left'), ('Kind', 'left'), ('Device', 'center'))
    table.add_row(name, snake_case_to_title_case(item['inputKind']), device[1] if device else '')
    ctx.print_table(table)

    if not verbose or device is None:
        return

    prop = device[0]
    with remote_call(f"failed to list devices of {name}"):
        items = ctx.client.get_input_properties_list_property_items(name, prop).property_items
    devices = ctx.style.table(('Devices', 'left'))
    for entry in items:
        if entry.get('itemName'):
            devices.add_row(entry['itemName'])
    ctx.print_table(devices)


@input_group.command('update', aliases=('up',))
@click.argument('input_name')
@click.argument('device_name')
@pass_context
def update(ctx, input_name, device_name):
    """Select the capture device of an input."""
    with remote_call(f"failed to get input settings of {input_name}"):
        current = ctx.client.get_input_settings(input_name).input_settings

    device = find_device(ctx.client, input_name, current)
    if device is None:
        raise ObsctlError(f"no device property found for input '{input_name}'")
    prop = device[0]

    with remote_call(f"failed to list devices of {input_name}"):
        items = ctx.client.get_input_properties_list_property_items(input_name, prop).property_items
    selected = find_by_name(items, device_name, 'device', key=lambda i: i.get('itemName'))

    settings = dict(current)
    settings[prop] = selected.get('itemValue')
    logger.debug(f"[SETTINGS] {input_name}: {prop} -> {settings[prop]!r}")

    with remote_call("failed to update input settings"):
        ctx.client.set_input_settings(input_name, settings, True)
    ctx.write("Input ", ctx.highlight(input_name), f" {prop} set to ", ctx.highlight(device_name))


@input_group.command('volume', aliases=('vol',), context_settings={'ignore_unknown_options': True})
@click.argument('input_name')
@click.argument('db', required=False, type=VOLUME)
@pass_context
def volume(ctx, input_name, db):
    """Get or set the volume of an input in dB (-90 to 0)."""
    if db is None:
        with remote_call(f"failed to get volume of input {input_name}"):
            current = ctx.client.get_input_volume(input_name).input_volume_db
        ctx.write("Volume of input ", ctx.highlight(input_name), f": {current:.1f} dB")
        return

    with remote_call(f"failed to set volume of input {input_name}"):
        ctx.client.set_input_volume(input_name, vol_db=db)
    ctx.write("Set volume of input ", ctx.highlight(input_name), f" to {db:.1f} dB")
