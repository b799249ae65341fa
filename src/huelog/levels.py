"""Severity levels for huelog loggers."""

from enum import IntEnum

_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class Level(IntEnum):
    """
    Ordered severity levels.

    A logger emits a message when the message's level is greater than or
    equal to the logger's minimum level. OFF sits above every real severity
    and is only ever used as a threshold.
    """

    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    OFF = 5

    @classmethod
    def parse(cls, value: "Level | int | str") -> "Level":
        """
        Convert a level, ordinal or case-insensitive name into a Level.

        Args:
            value: Level member, int ordinal (0-5) or name such as "warn"

        Returns:
            The matching Level

        Raises:
            ValueError: If the value does not name a known level
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid log level: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            name = value.strip().upper()
            if name.isdigit():
                return cls(int(name))
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Invalid log level: {value!r}") from None
        raise ValueError(f"Invalid log level: {value!r}")

    @property
    def tag(self) -> str:
        """Bracketed tag printed in front of each line, e.g. "[INFO]"."""
        return f"[{self.name}]"
