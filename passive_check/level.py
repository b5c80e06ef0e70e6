"""Severity levels for a passive check result.

The integer values are the standard plugin return codes a collector expects:

  0 = OK
  1 = WARNING
  2 = CRITICAL
  3 = UNKNOWN
"""

from enum import IntEnum


class Level(IntEnum):
    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3


def to_level(text) -> Level:
    """Map level text such as "ok" or "Critical" to a Level.

    Matching ignores case and surrounding whitespace. Unrecognised text,
    and anything that is not a string, maps to Level.UNKNOWN.
    """
    if not isinstance(text, str):
        return Level.UNKNOWN
    try:
        return Level[text.strip().upper()]
    except KeyError:
        return Level.UNKNOWN
