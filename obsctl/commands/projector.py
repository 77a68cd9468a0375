"""Fullscreen projectors."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import current_program_scene


@click.group(cls=AliasedGroup, aliases=('prj',))
def projector():
    """Manage projectors."""


@projector.command('list-monitors', aliases=('ls-m',))
@pass_context
def list_monitors(ctx):
    """List available monitors."""
    with remote_call("failed to get monitor list"):
        monitors = ctx.client.get_monitor_list().monitors

    if not monitors:
        ctx.write("No monitors found for projectors.")
        return

    table = ctx.style.table(('Monitor ID', 'center'), ('Monitor Name', 'left'))
    for monitor in monitors:
        table.add_row(str(monitor['monitorIndex']), monitor['monitorName'])
    ctx.print_table(table)


@projector.command('open', aliases=('o',))
@click.argument('source_name', required=False, default='')
@click.option('--monitor-index', type=int, default=0, show_default=True,
              help='Index of the monitor to open the projector on.')
@pass_context
def open_projector(ctx, source_name, monitor_index):
    """Open a fullscreen projector for a source on a specific monitor."""
    if not source_name:
        source_name = current_program_scene(ctx.client)

    with remote_call(f"failed to open projector for source '{source_name}'"):
        ctx.client.open_source_projector(source_name, monitor_index=monitor_index)
    ctx.write(
        "Opened projector for source '", ctx.highlight(source_name), f"' on monitor index {monitor_index}."
    )
