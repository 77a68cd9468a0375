# Command groups
# Add new groups here and they'll be registered on the root command

from .version import obs_version
from .scene import scene
from .sceneitem import sceneitem
from .group import group
from .input import input_group
from .text import text
from .record import record
from .stream import stream
from .scenecollection import scenecollection
from .profile import profile
from .replaybuffer import replaybuffer
from .studiomode import studiomode
from .virtualcam import virtualcam
from .hotkey import hotkey
from .filter import filter_group
from .projector import projector
from .screenshot import screenshot
from .settings import settings
from .media import media

# Registration order is also the order shown in --help
COMMANDS = [
    obs_version,
    scene,
    sceneitem,
    group,
    input_group,
    text,
    record,
    stream,
    scenecollection,
    profile,
    replaybuffer,
    studiomode,
    virtualcam,
    hotkey,
    filter_group,
    projector,
    screenshot,
    settings,
    media,
]

__all__ = [
    'COMMANDS', 'obs_version', 'scene', 'sceneitem', 'group', 'input_group', 'text', 'record', 'stream',
    'scenecollection', 'profile', 'replaybuffer', 'studiomode', 'virtualcam', 'hotkey', 'filter_group',
    'projector', 'screenshot', 'settings', 'media',
]
