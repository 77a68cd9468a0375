"""
OBS websocket session.

Wraps obsws_python.ReqClient so that exactly one connection is opened per
invocation and always closed again, whatever the command's outcome.
"""

import logging
from typing import Optional

import obsws_python as obs

from .config import ObsConfig
from .errors import ObsConnectionError

logger = logging.getLogger(__name__)


class OBSSession:
    """A single connection to OBS, usable as a context manager."""

    def __init__(self, config: ObsConfig):
        self.config = config
        self._client: Optional[obs.ReqClient] = None

    def connect(self) -> obs.ReqClient:
        """
        Connect and authenticate.

        Raises:
            ObsConnectionError: on refused connections, failed authentication
                or handshake timeouts. There is no retry.
        """
        if self._client is not None:
            return self._client

        address = f"{self.config.host}:{self.config.port}"
        logger.debug(f"[CONNECT] Connecting to {address} (timeout {self.config.timeout}s)")
        try:
            self._client = obs.ReqClient(
                host=self.config.host,
                port=self.config.port,
                password=self.config.password if self.config.password else None,
                timeout=self.config.timeout,
            )
        except Exception as e:
            logger.debug(f"[CONNECT] Failed: {e!r}")
            raise ObsConnectionError(f"failed to connect to OBS at {address}: {e}") from e

        logger.info(f"[CONNECT] Connected to {address}")
        return self._client

    def disconnect(self):
        """Close the connection. Failures are logged, never raised."""
        if self._client is None:
            return
        try:
            self._client.disconnect()
            logger.info("[DISCONNECT] Disconnected from OBS")
        except Exception as e:
            logger.warning(f"[DISCONNECT] Failed to disconnect from OBS: {e}")
        finally:
            self._client = None

    def __enter__(self) -> obs.ReqClient:
        return self.connect()

    def __exit__(self, exc_type, exc, tb):
        self.disconnect()
        return False
