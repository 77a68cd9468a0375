"""Video, recording, profile and stream service settings."""

import logging

import click
from obsws_python.error import OBSSDKRequestError

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import remote_call

logger = logging.getLogger(__name__)

# (category, name, label) of the profile parameters shown by "settings show"
PROFILE_PARAMETERS = [
    ('Output', 'Mode', 'Output Mode'),
    ('SimpleOutput', 'StreamEncoder', 'Simple Streaming Encoder'),
    ('SimpleOutput', 'RecEncoder', 'Simple Recording Encoder'),
    ('SimpleOutput', 'RecFormat2', 'Simple Recording Video Format'),
    ('SimpleOutput', 'RecAudioEncoder', 'Simple Recording Audio Format'),
    ('SimpleOutput', 'RecQuality', 'Simple Recording Quality'),
    ('AdvOut', 'Encoder', 'Advanced Streaming Encoder'),
    ('AdvOut', 'RecEncoder', 'Advanced Recording Encoder'),
    ('AdvOut', 'RecType', 'Advanced Recording Type'),
    ('AdvOut', 'RecFormat2', 'Advanced Recording Video Format'),
    ('AdvOut', 'RecAudioEncoder', 'Advanced Recording Audio Format'),
]

# option name -> (response attribute, label)
VIDEO_FIELDS = {
    'base_width': ('base_width', 'Base Width'),
    'base_height': ('base_height', 'Base Height'),
    'output_width': ('output_width', 'Output Width'),
    'output_height': ('output_height', 'Output Height'),
    'fps_num': ('fps_numerator', 'FPS Numerator'),
    'fps_den': ('fps_denominator', 'FPS Denominator'),
}


def video_settings(client):
    with remote_call("failed to get video settings"):
        return client.get_video_settings()


def video_table(ctx, resp):
    table = ctx.style.table(('Video Setting', 'left'), ('Value', 'left'))
    for attr, label in VIDEO_FIELDS.values():
        table.add_row(label, f"{getattr(resp, attr):.0f}")
    return table


def profile_parameter(client, category: str, name: str):
    """Value of a profile parameter, or None if OBS does not know it."""
    try:
        return client.get_profile_parameter(category, name).parameter_value
    except OBSSDKRequestError as e:
        logger.debug(f"[SETTINGS] Skipping {category}.{name}: {e}")
        return None


@click.group(cls=AliasedGroup, aliases=('set',))
def settings():
    """Manage video and profile settings."""


@settings.command('show', aliases=('s',))
@click.option('--video', is_flag=True, help='Show video settings.')
@click.option('--record', is_flag=True, help='Show record directory.')
@click.option('--profile', is_flag=True, help='Show profile parameters.')
@pass_context
def show(ctx, video, record, profile):
    """Show settings. Without flags, shows all of them."""
    if not (video or record or profile):
        video = record = profile = True

    if video:
        ctx.print_table(video_table(ctx, video_settings(ctx.client)))

    if record:
        with remote_call("failed to get record directory"):
            directory = ctx.client.get_record_directory().record_directory
        table = ctx.style.table(('Record Setting', 'left'), ('Value', 'left'))
        table.add_row('Directory', directory)
        ctx.print_table(table)

    if profile:
        table = ctx.style.table(('Profile Parameter', 'left'), ('Value', 'left'))
        with remote_call("failed to get profile parameters"):
            for category, name, label in PROFILE_PARAMETERS:
                value = profile_parameter(ctx.client, category, name)
                if value:
                    table.add_row(label, value)
        ctx.print_table(table)


@settings.command('profile', aliases=('p',))
@click.argument('category')
@click.argument('name')
@click.argument('value', required=False, default='')
@pass_context
def profile(ctx, category, name, value):
    """
    Get or set a profile parameter.

    CATEGORY is e.g. AdvOut, SimpleOutput or Output; NAME is e.g. RecFormat2.
    """
    if not value:
        with remote_call(f"failed to get parameter {category}.{name}"):
            current = ctx.client.get_profile_parameter(category, name).parameter_value
        ctx.write(f"{category}.{name} = ", current or '')
        return

    with remote_call(f"failed to set parameter {category}.{name}"):
        ctx.client.set_profile_parameter(category, name, value)
    ctx.write(f"Set {category}.{name} = ", value)


@settings.command('stream-service', aliases=('ss',))
@click.argument('service_type')
@click.option('--key', envvar='OBS_STREAM_KEY', default='', help='Stream key.')
@click.option('--server', default='', help='Stream server URL.')
@pass_context
def stream_service(ctx, service_type, key, server):
    """
    Get or set stream service settings.

    SERVICE_TYPE is e.g. rtmp_common or rtmp_custom. Without --key or
    --server the current settings are shown.
    """
    with remote_call("failed to get stream service settings"):
        current = ctx.client.get_stream_service_settings().stream_service_settings or {}

    if not key and not server:
        table = ctx.style.table(('Stream Service Setting', 'left'), ('Value', 'left'))
        table.add_row('Type', service_type)
        table.add_row('Key', current.get('key', ''))
        table.add_row('Server', current.get('server', ''))
        ctx.print_table(table)
        return

    updated = dict(current)
    if key:
        updated['key'] = key
    if server:
        updated['server'] = server

    with remote_call("failed to set stream service settings"):
        ctx.client.set_stream_service_settings(service_type, updated)
    ctx.write("Stream service settings updated successfully.")


@settings.command('video', aliases=('v',))
@click.option('--show', is_flag=True, help='Show video settings.')
@click.option('--base-width', type=click.IntRange(min=8), help='Base (canvas) width.')
@click.option('--base-height', type=click.IntRange(min=8), help='Base (canvas) height.')
@click.option('--output-width', type=click.IntRange(min=8), help='Output (scaled) width.')
@click.option('--output-height', type=click.IntRange(min=8), help='Output (scaled) height.')
@click.option('--fps-num', type=click.IntRange(min=1), help='Frames per second numerator.')
@click.option('--fps-den', type=click.IntRange(min=1), help='Frames per second denominator.')
@pass_context
def video(ctx, show, **values):
    """Get or set video settings. Omitted values keep their current setting."""
    resp = video_settings(ctx.client)

    if show or all(v is None for v in values.values()):
        ctx.print_table(video_table(ctx, resp))
        return

    merged = {
        option: int(getattr(resp, attr)) if values[option] is None else values[option]
        for option, (attr, _) in VIDEO_FIELDS.items()
    }
    with remote_call("failed to set video settings"):
        ctx.client.set_video_settings(
            merged['fps_num'],
            merged['fps_den'],
            merged['base_width'],
            merged['base_height'],
            merged['output_width'],
            merged['output_height'],
        )
    ctx.write("Video settings updated successfully.")
