"""OBS and obs-websocket version."""

import click

from ..context import pass_context
from ..dispatch import AliasedCommand
from ..errors import remote_call


@click.command('obs-version', cls=AliasedCommand, aliases=('v',))
@pass_context
def obs_version(ctx):
    """Print OBS client and websocket version."""
    with remote_call("failed to get OBS version"):
        resp = ctx.client.get_version()
    ctx.write(
        "OBS Client Version: ", ctx.highlight(resp.obs_version),
        " with Websocket Version: ", ctx.highlight(resp.obs_web_socket_version),
    )
