"""
Error types raised by obsctl.

Every error is a click exception, so the dispatcher prints it as
``Error: <message>`` and exits non-zero without a traceback.
"""

import logging
from contextlib import contextmanager

import click
from obsws_python.error import OBSSDKError, OBSSDKTimeoutError

logger = logging.getLogger(__name__)


class ObsctlError(click.ClickException):
    """Base class for user-facing failures (exit code 1)."""


class ObsConnectionError(ObsctlError):
    """Could not open a session with the OBS websocket server."""


class NotFoundError(ObsctlError):
    """A named entity is absent from the collection it was looked up in."""

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} '{name}' not found")


class RemoteCallError(ObsctlError):
    """OBS answered a request with a failure."""


class RemoteTimeoutError(RemoteCallError):
    """OBS did not answer a request within the configured timeout."""


class ValidationError(click.BadParameter):
    """A value is outside the range OBS accepts (exit code 2)."""


class FormatError(ValidationError):
    """A value could not be parsed, e.g. a malformed time string."""


@contextmanager
def remote_call(message: str):
    """
    Wrap remote failures raised inside the block.

    Args:
        message: Context prefix, e.g. "failed to mute input Mic/Aux"
    """
    try:
        yield
    except OBSSDKTimeoutError as e:
        logger.debug(f"[REQUEST] Timed out: {message}")
        raise RemoteTimeoutError(f"{message}: {e}") from e
    except OBSSDKError as e:
        logger.debug(f"[REQUEST] Failed: {message}: {e}")
        raise RemoteCallError(f"{message}: {e}") from e
