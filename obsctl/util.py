"""
Pure formatting and lookup helpers shared by the command modules.
"""

import logging
from typing import Any, Callable, Iterable, Optional, TypeVar

from obsws_python.error import OBSSDKRequestError

from .errors import FormatError, NotFoundError, ValidationError, remote_call

logger = logging.getLogger(__name__)

T = TypeVar('T')

MIN_VOLUME_DB = -90.0
MAX_VOLUME_DB = 0.0

# Input properties that hold the selected capture device, in probe order
DEVICE_PROPERTIES = ('device', 'device_id')


def snake_case_to_title_case(snake: str) -> str:
    """Convert "snake_case_words" to "Snake Case Words"."""
    words = snake.split('_')
    return ' '.join(word[:1].upper() + word[1:] for word in words)


def enabled_mark(enabled: bool, no_color: bool = False) -> str:
    """Check or cross glyph for a boolean; plain ASCII when colour is off."""
    if no_color:
        return '+' if enabled else '-'
    return '✓' if enabled else '❌'


def trim_prefix(s: str, prefix: str) -> str:
    if prefix and s.startswith(prefix):
        return s[len(prefix):]
    return s


def parse_time_string(value: str) -> int:
    """
    Parse a media cursor position into milliseconds.

    Accepts SS, MM:SS or HH:MM:SS. Each component must be a non-negative
    integer; the left-most component carries the largest unit.

    Raises:
        FormatError: on empty input, a non-numeric component or more than
            three components.
    """
    parts = value.split(':') if value else []
    if not parts or len(parts) > 3:
        raise FormatError(f"invalid time format '{value}', expected SS, MM:SS or HH:MM:SS")

    seconds = 0
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise FormatError(f"invalid time component '{part}' in '{value}'")
        seconds = seconds * 60 + int(part)
    return seconds * 1000


def format_milliseconds(ms: float) -> str:
    """Format milliseconds as HH:MM:SS, or MM:SS when under an hour."""
    total_seconds = int(ms // 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def validate_volume(db: float) -> float:
    """Return db unchanged if OBS accepts it, else raise ValidationError."""
    if not MIN_VOLUME_DB <= db <= MAX_VOLUME_DB:
        raise ValidationError(
            f"volume {db} dB is out of range, must be between {MIN_VOLUME_DB} and {MAX_VOLUME_DB}"
        )
    return db


def find_by_name(
    items: Iterable[T],
    name: str,
    kind: str,
    key: Callable[[T], Any] = lambda item: item,
    where: Optional[Callable[[T], bool]] = None,
) -> T:
    """
    Return the first item whose key equals name.

    Args:
        items: Collection fetched from OBS (dicts or plain strings)
        name: Name to look for
        kind: Entity kind used in the error message, e.g. "group"
        key: Extracts the comparable name from an item
        where: Optional extra predicate an item must satisfy

    Raises:
        NotFoundError: if no item matches.
    """
    for item in items:
        if where is not None and not where(item):
            continue
        if key(item) == name:
            return item
    raise NotFoundError(kind, name)


def find_device(client, input_name: str, settings: Optional[dict] = None) -> Optional[tuple[str, str, Any]]:
    """
    Find the capture device property of an input.

    Probes each of DEVICE_PROPERTIES. Inputs that don't expose a property
    make OBS reject the probe, which is treated as "not this property".

    Returns:
        (property name, device name, device value) of the device selected in
        settings, falling back to the first named device, or None if the
        input has no device property.
    """
    for prop in DEVICE_PROPERTIES:
        try:
            resp = client.get_input_properties_list_property_items(input_name, prop)
        except OBSSDKRequestError as e:
            logger.debug(f"[DEVICE] {input_name} has no '{prop}' property: {e}")
            continue

        named = [item for item in resp.property_items if item.get('itemName')]
        if not named:
            continue

        selected = (settings or {}).get(prop)
        for item in named:
            if selected is not None and item.get('itemValue') == selected:
                return prop, item['itemName'], item.get('itemValue')
        return prop, named[0]['itemName'], named[0].get('itemValue')

    return None


def current_program_scene(client) -> str:
    """Name of the scene currently live in OBS; the default for omitted scene arguments."""
    with remote_call("failed to get current program scene"):
        return client.get_current_program_scene().current_program_scene_name
