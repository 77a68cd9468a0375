"""Hotkeys."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call


@click.group(cls=AliasedGroup, aliases=('hk',))
def hotkey():
    """Manage hotkeys."""


@hotkey.command('list', aliases=('ls',))
@pass_context
def list_hotkeys(ctx):
    """List all hotkeys."""
    with remote_call("failed to get hotkey list"):
        hotkeys = ctx.client.get_hotkey_list().hotkeys

    table = ctx.style.table(('Hotkey Name', 'left'))
    for name in hotkeys:
        table.add_row(name)
    ctx.print_table(table)


@hotkey.command('trigger', aliases=('tr',))
@click.argument('hotkey_name')
@pass_context
def trigger(ctx, hotkey_name):
    """Trigger a hotkey by name."""
    with remote_call(f"failed to trigger hotkey {hotkey_name}"):
        ctx.client.trigger_hotkey_by_name(hotkey_name)
    ctx.write("Triggered hotkey: ", ctx.highlight(hotkey_name))


@hotkey.command('trigger-sequence', aliases=('trs',))
@click.argument('key_id')
@click.option('--shift', is_flag=True, help='Shift modifier.')
@click.option('--ctrl', is_flag=True, help='Control modifier.')
@click.option('--alt', is_flag=True, help='Alt modifier.')
@click.option('--cmd', is_flag=True, help='Command modifier.')
@pass_context
def trigger_sequence(ctx, key_id, shift, ctrl, alt, cmd):
    """Trigger a hotkey by key sequence, e.g. OBS_KEY_F1."""
    with remote_call(f"failed to trigger key sequence {key_id}"):
        ctx.client.trigger_hotkey_by_key_sequence(key_id, shift, ctrl, alt, cmd)
    ctx.write("Triggered key sequence: ", ctx.highlight(key_id))
