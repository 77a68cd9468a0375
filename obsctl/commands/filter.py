"""Source filters."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import current_program_scene, snake_case_to_title_case


def format_setting(value) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def settings_lines(settings: dict) -> str:
    """One "Title Case Key: value" line per setting, sorted case-insensitively."""
    lines = [f"{snake_case_to_title_case(key)}: {format_setting(value)}" for key, value in settings.items()]
    return '\n'.join(sorted(lines, key=str.lower))


def filter_enabled(client, source_name: str, filter_name: str) -> bool:
    with remote_call(f"failed to get filter {filter_name} on source {source_name}"):
        return client.get_source_filter(source_name, filter_name).filter_enabled


def set_filter_enabled(client, source_name: str, filter_name: str, enabled: bool):
    action = 'enable' if enabled else 'disable'
    with remote_call(f"failed to {action} filter {filter_name} on source {source_name}"):
        client.set_source_filter_enabled(source_name, filter_name, enabled)


@click.group('filter', cls=AliasedGroup, aliases=('f',))
def filter_group():
    """Manage filters."""


@filter_group.command('list', aliases=('ls',))
@click.argument('source_name', required=False, default='')
@pass_context
def list_filters(ctx, source_name):
    """List all filters of a source. Defaults to the current scene."""
    if not source_name:
        source_name = current_program_scene(ctx.client)

    with remote_call(f"failed to get filters of source {source_name}"):
        filters = ctx.client.get_source_filter_list(source_name).filters

    if not filters:
        ctx.write("No filters found for source ", ctx.highlight(source_name), ".")
        return

    table = ctx.style.table(('Filter Name', 'left'), ('Kind', 'left'), ('Enabled', 'center'), ('Settings', 'left'))
    for item in filters:
        with remote_call(f"failed to get default settings for filter {item['filterName']}"):
            defaults = ctx.client.get_source_filter_default_settings(item['filterKind']).default_filter_settings

        settings = dict(defaults or {})
        settings.update(item.get('filterSettings') or {})
        table.add_row(
            item['filterName'],
            snake_case_to_title_case(item['filterKind']),
            ctx.mark(item['filterEnabled']),
            settings_lines(settings),
        )
    ctx.print_table(table)


@filter_group.command('enable', aliases=('on',))
@click.argument('source_name')
@click.argument('filter_name')
@pass_context
def enable(ctx, source_name, filter_name):
    """Enable filter."""
    set_filter_enabled(ctx.client, source_name, filter_name, True)
    ctx.write("Filter ", ctx.highlight(filter_name), " enabled on source ", ctx.highlight(source_name), ".")


@filter_group.command('disable', aliases=('off',))
@click.argument('source_name')
@click.argument('filter_name')
@pass_context
def disable(ctx, source_name, filter_name):
    """Disable filter."""
    set_filter_enabled(ctx.client, source_name, filter_name, False)
    ctx.write("Filter ", ctx.highlight(filter_name), " disabled on source ", ctx.highlight(source_name), ".")


@filter_group.command('toggle', aliases=('tg',))
@click.argument('source_name')
@click.argument('filter_name')
@pass_context
def toggle(ctx, source_name, filter_name):
    """Toggle filter."""
    enabled = not filter_enabled(ctx.client, source_name, filter_name)
    set_filter_enabled(ctx.client, source_name, filter_name, enabled)
    ctx.write(
        "Filter ", ctx.highlight(filter_name), " on source ", ctx.highlight(source_name),
        f" is now {'enabled' if enabled else 'disabled'}.",
    )


@filter_group.command('status', aliases=('ss',))
@click.argument('source_name')
@click.argument('filter_name')
@pass_context
def status(ctx, source_name, filter_name):
    """Get filter status."""
    enabled = filter_enabled(ctx.client, source_name, filter_name)
    ctx.write(
        "Filter ", ctx.highlight(filter_name), " on source ", ctx.highlight(source_name),
        f" is {'enabled' if enabled else 'disabled'}.",
    )
