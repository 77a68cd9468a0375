"""
Click parameter types that validate values while the command line is parsed,
before any connection to OBS is made.
"""

import click

from .util import parse_time_string, validate_volume


class VolumeType(click.ParamType):
    """Input volume in dB, limited to what OBS accepts."""

    name = 'db'

    def convert(self, value, param, ctx):
        if isinstance(value, float):
            return validate_volume(value)
        try:
            db = float(value)
        except ValueError:
            self.fail(f"'{value}' is not a valid volume", param, ctx)
        return validate_volume(db)


class TimeType(click.ParamType):
    """Media position given as SS, MM:SS or HH:MM:SS, converted to milliseconds."""

    name = 'time'

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        return parse_time_string(value)


VOLUME = VolumeType()
TIME = TimeType()
