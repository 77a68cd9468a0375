"""obsctl - control a running OBS Studio over obs-websocket from the command line."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version('obsctl')
except PackageNotFoundError:
    __version__ = '(devel)'
