"""Source screenshots."""

import os

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call
from ..util import trim_prefix


@click.group(cls=AliasedGroup, aliases=('ss',))
def screenshot():
    """Take screenshots."""


@screenshot.command('save', aliases=('sv',))
@click.argument('source_name')
@click.argument('file_path')
@click.option('--width', type=int, default=1920, show_default=True, help='Width of the screenshot in pixels.')
@click.option('--height', type=int, default=1080, show_default=True, help='Height of the screenshot in pixels.')
@click.option('--quality', type=int, default=-1, show_default=True,
              help='Compression quality (0-100, -1 for the format default).')
@pass_context
def save(ctx, source_name, file_path, width, height, quality):
    """Take a screenshot and save it to a file. The format follows the file extension."""
    image_format = trim_prefix(os.path.splitext(file_path)[1], '.')
    with remote_call("failed to take screenshot"):
        ctx.client.save_source_screenshot(source_name, image_format, file_path, width, height, quality)
    ctx.write("Screenshot saved to ", ctx.highlight(file_path), ".")
