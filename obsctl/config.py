"""
Configuration for connecting to OBS and styling output.

Values come from command line options, which fall back to environment
variables. Environment variables can in turn be set from a local .env file
or from config.env in the user config directory.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import click
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

APP_NAME = 'obsctl'

DEFAULT_HOST = 'localhost'
DEFAULT_PORT = 4455
DEFAULT_TIMEOUT = 5


@dataclass(frozen=True)
class ObsConfig:
    """Connection settings for the OBS websocket server."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    password: str = ''
    timeout: int = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class StyleConfig:
    """Output styling settings."""

    style: str = ''
    no_border: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class CLIState:
    """
    Settings shared by every command of one invocation.

    Stored in the root click context's obj by the root callback.
    """

    obs: ObsConfig = field(default_factory=ObsConfig)
    style: StyleConfig = field(default_factory=StyleConfig)


def env_file_paths() -> list[Path]:
    """Env files in load order. Earlier files win over later ones."""
    return [
        Path('.env'),
        Path(click.get_app_dir(APP_NAME)) / 'config.env',
    ]


def load_env_files(paths: list[Path] = None) -> list[Path]:
    """
    Load env files into os.environ without overriding existing variables.

    Returns:
        The files that were found and loaded
    """
    loaded = []
    for path in paths if paths is not None else env_file_paths():
        if path.is_file():
            logger.debug(f"[CONFIG] Loading {path}")
            load_dotenv(path, override=False)
            loaded.append(path)
    return loaded
