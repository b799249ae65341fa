"""Line header flags.

These bits select the metadata written between the severity tag and the
message. The values match the conventional standard-logger flags so that
bitmasks can be carried over unchanged.
"""

import os
from datetime import datetime, timezone

DATE = 1  # local date: 2009/01/23
TIME = 2  # local time: 01:23:23
MICROSECONDS = 4  # microsecond resolution: 01:23:23.123123, implies TIME
LONG_FILE = 8  # full file path and line number: /a/b/c.py:23
SHORT_FILE = 16  # final path element and line number: c.py:23, overrides LONG_FILE
UTC = 32  # use UTC rather than the local time zone
MSG_PREFIX = 64  # move the prefix from the start of the line to before the message
STD_FLAGS = DATE | TIME


def now(flags: int) -> datetime:
    """Current time, in UTC when the UTC flag is set."""
    if flags & UTC:
        return datetime.now(timezone.utc)
    return datetime.now()


def format_header(
    flags: int,
    when: datetime | None = None,
    caller: tuple[str, int] | None = None,
) -> str:
    """
    Render the header selected by ``flags``.

    Args:
        flags: Header flags bitmask
        when: Timestamp for the date/time fields; converted to UTC when the
            UTC flag is set
        caller: (filename, line) of the code that issued the log call, used
            by the file flags

    Returns:
        Header text, each field followed by a single space. Empty when no
        header flags are set.
    """
    parts = []

    if flags & (DATE | TIME | MICROSECONDS):
        if when is None:
            when = now(flags)
        elif flags & UTC:
            when = when.astimezone(timezone.utc)

        if flags & DATE:
            parts.append(f"{when.year:04d}/{when.month:02d}/{when.day:02d} ")
        if flags & (TIME | MICROSECONDS):
            clock = f"{when.hour:02d}:{when.minute:02d}:{when.second:02d}"
            if flags & MICROSECONDS:
                clock += f".{when.microsecond:06d}"
            parts.append(clock + " ")

    if flags & (SHORT_FILE | LONG_FILE):
        filename, line = caller if caller is not None else ("???", 0)
        if flags & SHORT_FILE:
            filename = os.path.basename(filename)
        parts.append(f"{filename}:{line}: ")

    return "".join(parts)


def needs_caller(flags: int) -> bool:
    """True if rendering ``flags`` requires the caller's file and line."""
    return bool(flags & (SHORT_FILE | LONG_FILE))
