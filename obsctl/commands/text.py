"""Text sources (text_gdiplus, text_ft2_source and friends)."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import ObsctlError, remote_call

TEXT_KIND_PREFIX = 'text_'


def text_input_settings(client, input_name: str) -> dict:
    """
    Current settings of a text input.

    Raises:
        ObsctlError: if the input is not a text source.
    """
    with remote_call(f"failed to get input settings of {input_name}"):
        resp = client.get_input_settings(input_name)
    if not resp.input_kind.startswith(TEXT_KIND_PREFIX):
        raise ObsctlError(f"input {input_name} is of {resp.input_kind}, not a text source")
    return resp.input_settings


@click.group(cls=AliasedGroup, aliases=('t',))
def text():
    """Manage text inputs."""


@text.command('current', aliases=('c',))
@click.argument('input_name')
@pass_context
def current(ctx, input_name):
    """Display current text for a text input."""
    settings = text_input_settings(ctx.client, input_name)
    if 'text' not in settings:
        raise ObsctlError(f"input {input_name} does not have a 'text' setting")
    ctx.write("Current text for source ", ctx.highlight(input_name), ": ", settings['text'] or '(empty)')


@text.command('update', aliases=('u',))
@click.argument('input_name')
@click.argument('new_text', required=False, default='')
@pass_context
def update(ctx, input_name, new_text):
    """Update the text of a text input."""
    settings = dict(text_input_settings(ctx.client, input_name))
    settings['text'] = new_text
    with remote_call(f"failed to update text for source {input_name}"):
        ctx.client.set_input_settings(input_name, settings, True)
    ctx.write("Updated text for source ", ctx.highlight(input_name), " to: ", new_text or '(empty)')
