"""Leveled, colorized logger."""

import sys
import threading
from typing import Protocol

from huelog import flags as header
from huelog.config import settings
from huelog.formatting import render_prefix, render_tag, sprint, sprintf
from huelog.levels import Level
from huelog.registry import Registry, get_registry


class Writer(Protocol):
    """
    Output sink for a logger.

    Anything with a text ``write()`` works: sys.stdout, an open file,
    io.StringIO. A ``flush()`` method is called after each line when
    present.
    """

    def write(self, s: str, /) -> object: ...


class Logger:
    """
    Writes prefixed, level-filtered lines to a writer.

    Every line is ``prefix + tag + header + message``. With color enabled
    the prefix and the tag are wrapped in ANSI escape codes. Configuration
    can change at any time; each line is rendered from the configuration
    current at the moment it is written.

    Build loggers with new() or the constructor; either registers the logger
    with a Registry so the *_all functions reach it.
    """

    def __init__(
        self,
        writer: Writer,
        prefix: str = "",
        *,
        registry: Registry | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self._writer = writer
        self._prefix = prefix
        self._flags = settings.flags
        self._level = settings.level
        self._color = settings.color
        self._prefix_pattern = render_prefix(prefix, self._color)

        get_registry(registry).register(self)

    def __repr__(self) -> str:
        return (
            f"Logger(prefix={self._prefix!r}, level={self._level.name}, "
            f"flags={self._flags}, color={self._color})"
        )

    @property
    def writer(self) -> Writer:
        return self._writer

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def flags(self) -> int:
        return self._flags

    @property
    def level(self) -> Level:
        return self._level

    @property
    def color_enabled(self) -> bool:
        return self._color

    def is_color_enabled(self) -> bool:
        return self._color

    def set_writer(self, writer: Writer) -> None:
        with self._lock:
            self._writer = writer

    def set_prefix(self, prefix: str) -> None:
        with self._lock:
            self._prefix = prefix
            self._prefix_pattern = render_prefix(prefix, self._color)

    def set_flags(self, flags: int) -> None:
        with self._lock:
            self._flags = flags

    def set_level(self, level: Level | int | str) -> None:
        level = Level.parse(level)
        with self._lock:
            self._level = level

    def enable_color(self) -> None:
        with self._lock:
            self._color = True
            self.set_prefix(self._prefix)

    def disable_color(self) -> None:
        with self._lock:
            self._color = False
            self.set_prefix(self._prefix)

    def _output(self, level: Level, message: str) -> None:
        with self._lock:
            flags = self._flags
            caller = None
            if header.needs_caller(flags):
                # Frame 2 is whoever called the public emit method
                frame = sys._getframe(2)
                caller = (frame.f_code.co_filename, frame.f_lineno)

            lead = self._prefix_pattern + render_tag(level, self._color)
            head = header.format_header(flags, caller=caller)
            if flags & header.MSG_PREFIX:
                line = head + lead + message
            else:
                line = lead + head + message
            if not line.endswith("\n"):
                line += "\n"

            self._writer.write(line)
            flush = getattr(self._writer, "flush", None)
            if flush is not None:
                flush()

    def debug(self, *values: object) -> None:
        if self._level > Level.DEBUG:
            return
        self._output(Level.DEBUG, sprint(*values))

    def debugf(self, fmt: str, *values: object) -> None:
        if self._level > Level.DEBUG:
            return
        self._output(Level.DEBUG, sprintf(fmt, *values))

    def info(self, *values: object) -> None:
        if self._level > Level.INFO:
            return
        self._output(Level.INFO, sprint(*values))

    def infof(self, fmt: str, *values: object) -> None:
        if self._level > Level.INFO:
            return
        self._output(Level.INFO, sprintf(fmt, *values))

    def warn(self, *values: object) -> None:
        if self._level > Level.WARN:
            return
        self._output(Level.WARN, sprint(*values))

    def warnf(self, fmt: str, *values: object) -> None:
        if self._level > Level.WARN:
            return
        self._output(Level.WARN, sprintf(fmt, *values))

    def error(self, *values: object) -> None:
        if self._level > Level.ERROR:
            return
        self._output(Level.ERROR, sprint(*values))

    def errorf(self, fmt: str, *values: object) -> None:
        if self._level > Level.ERROR:
            return
        self._output(Level.ERROR, sprintf(fmt, *values))

    def fatal(self, *values: object) -> None:
        """Log at FATAL level. The process keeps running; exiting is up to the caller."""
        if self._level > Level.FATAL:
            return
        self._output(Level.FATAL, sprint(*values))

    def fatalf(self, fmt: str, *values: object) -> None:
        """Formatted FATAL log. Does not exit the process."""
        if self._level > Level.FATAL:
            return
        self._output(Level.FATAL, sprintf(fmt, *values))


def new(writer: Writer, prefix: str = "", *, registry: Registry | None = None) -> Logger:
    """
    Create a logger writing to ``writer`` with ``prefix`` before every line.

    Args:
        writer: Output sink
        prefix: Text shown at the start of each line (may be empty)
        registry: Registry to join, the process-wide default_registry if None

    Returns:
        A new Logger at level DEBUG with STD_FLAGS and color enabled
        (unless overridden through HUELOG_* settings)
    """
    return Logger(writer, prefix, registry=registry)
