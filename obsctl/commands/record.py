"""Recording output."""

import click

from ..context import pass_context
from ..dispatch import AliasedGroup
from ..errors import ObsctlError, remote_call


def record_status(client):
    with remote_call("failed to get recording status"):
        return client.get_record_status()


def require_recording(client):
    """
    Raises:
        ObsctlError: if no recording is active.
    """
    status = record_status(client)
    if not status.output_active:
        raise ObsctlError("recording is not in progress")
    return status


@click.group(cls=AliasedGroup, aliases=('rec',))
def record():
    """Manage recording."""


@record.command('start', aliases=('s',))
@pass_context
def start(ctx):
    """Start recording."""
    status = record_status(ctx.client)
    if status.output_active:
        if status.output_paused:
            ctx.write("Recording is already in progress and paused.")
        else:
            ctx.write("Recording is already in progress.")
        return

    with remote_call("failed to start recording"):
        ctx.client.start_record()
    ctx.write("Recording started successfully.")


@record.command('stop', aliases=('st',))
@pass_context
def stop(ctx):
    """Stop recording."""
    if not record_status(ctx.client).output_active:
        ctx.write("No recording is currently in progress.")
        return

    with remote_call("failed to stop recording"):
        resp = ctx.client.stop_record()
    ctx.write("Recording stopped successfully. Output file: ", ctx.highlight(resp.output_path))


@record.command('toggle', aliases=('tg',))
@pass_context
def toggle(ctx):
    """Toggle recording."""
    with remote_call("failed to toggle recording"):
        active = ctx.client.toggle_record().output_active
    ctx.write("Recording started successfully." if active else "Recording stopped successfully.")


@record.command('status', aliases=('ss',))
@pass_context
def status(ctx):
    """Show recording status."""
    resp = record_status(ctx.client)
    if not resp.output_active:
        ctx.write("Recording is not in progress.")
    elif resp.output_paused:
        ctx.write("Recording is paused.")
    else:
        ctx.write("Recording is in progress.")


@record.command('pause', aliases=('p',))
@pass_context
def pause(ctx):
    """Pause recording."""
    if require_recording(ctx.client).output_paused:
        raise ObsctlError("recording is already paused")

    with remote_call("failed to pause recording"):
        ctx.client.pause_record()
    ctx.write("Recording paused successfully.")


@record.command('resume', aliases=('r',))
@pass_context
def resume(ctx):
    """Resume recording."""
    if not require_recording(ctx.client).output_paused:
        raise ObsctlError("recording is not paused")

    with remote_call("failed to resume recording"):
        ctx.client.resume_record()
    ctx.write("Recording resumed successfully.")


@record.command('directory', aliases=('d',))
@click.argument('record_directory', required=False, default='')
@pass_context
def directory(ctx, record_directory):
    """Get or set the recording directory."""
    if not record_directory:
        with remote_call("failed to get recording directory"):
            current = ctx.client.get_record_directory().record_directory
        ctx.write("Current recording directory: ", ctx.highlight(current))
        return

    with remote_call(f"failed to set recording directory to {record_directory}"):
        ctx.client.set_record_directory(record_directory)
    ctx.write("Recording directory set to: ", ctx.highlight(record_directory))


@record.command('split', aliases=('sp',))
@pass_context
def split(ctx):
    """Split recording."""
    require_recording(ctx.client)
    with remote_call("failed to split recording"):
        ctx.client.split_record_file()
    ctx.write("Recording split successfully.")


@record.command('chapter', aliases=('c',))
@click.argument('chapter_name', required=False, default='')
@pass_context
def chapter(ctx, chapter_name):
    """Create a chapter in the recording."""
    require_recording(ctx.client)
    with remote_call("failed to create chapter"):
        ctx.client.create_record_chapter(chapter_name or None)
    ctx.write("Chapter ", ctx.highlight(chapter_name or 'unnamed'), " created successfully.")
