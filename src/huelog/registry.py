"""Registry of constructed loggers and the broadcast ("*_all") operations.

Every Logger registers itself with exactly one Registry when it is built.
Entries are never removed, so a registered logger lives as long as the
registry does. The module-level functions act on ``default_registry``
unless another registry is passed in.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import TYPE_CHECKING

from huelog.levels import Level
from huelog.logging import logger

if TYPE_CHECKING:
    from huelog.logger import Logger, Writer


class Registry:
    """
    Append-only, ordered collection of loggers.

    The lock only guards the list itself. Broadcasts iterate over a snapshot
    and call each logger's own mutator, which takes that logger's lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._loggers: list[Logger] = []

    def register(self, log: Logger) -> None:
        with self._lock:
            self._loggers.append(log)
            total = len(self._loggers)
        logger.debug(
            "Registered logger prefix={prefix!r} total={total}",
            prefix=log.prefix,
            total=total,
        )

    def loggers(self) -> tuple[Logger, ...]:
        """Snapshot of the registered loggers in insertion order."""
        with self._lock:
            return tuple(self._loggers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._loggers)

    def __iter__(self) -> Iterator[Logger]:
        return iter(self.loggers())

    def __contains__(self, log: object) -> bool:
        return any(entry is log for entry in self.loggers())

    def _broadcast(self, operation: str) -> tuple[Logger, ...]:
        targets = self.loggers()
        logger.debug(
            "Broadcasting {operation} to {count} loggers",
            operation=operation,
            count=len(targets),
        )
        return targets

    def set_writer_all(self, writer: Writer) -> None:
        for log in self._broadcast("set_writer"):
            log.set_writer(writer)

    def set_prefix_all(self, prefix: str) -> None:
        for log in self._broadcast("set_prefix"):
            log.set_prefix(prefix)

    def set_flags_all(self, flags: int) -> None:
        for log in self._broadcast("set_flags"):
            log.set_flags(flags)

    def set_level_all(self, level: Level | int | str) -> None:
        level = Level.parse(level)
        for log in self._broadcast("set_level"):
            log.set_level(level)

    def enable_color_all(self) -> None:
        for log in self._broadcast("enable_color"):
            log.enable_color()

    def disable_color_all(self) -> None:
        for log in self._broadcast("disable_color"):
            log.disable_color()


default_registry = Registry()


def get_registry(registry: Registry | None = None) -> Registry:
    """Return ``registry``, or the process-wide default when it is None."""
    return default_registry if registry is None else registry


def set_writer_all(writer: Writer, *, registry: Registry | None = None) -> None:
    """Set the output writer of every registered logger."""
    get_registry(registry).set_writer_all(writer)


def set_prefix_all(prefix: str, *, registry: Registry | None = None) -> None:
    """Set the prefix of every registered logger."""
    get_registry(registry).set_prefix_all(prefix)


def set_flags_all(flags: int, *, registry: Registry | None = None) -> None:
    """Set the header flags of every registered logger."""
    get_registry(registry).set_flags_all(flags)


def set_level_all(level: Level | int | str, *, registry: Registry | None = None) -> None:
    """Set the minimum level of every registered logger."""
    get_registry(registry).set_level_all(level)


def enable_color_all(*, registry: Registry | None = None) -> None:
    """Enable colored output on every registered logger."""
    get_registry(registry).enable_color_all()


def disable_color_all(*, registry: Registry | None = None) -> None:
    """Disable colored output on every registered logger."""
    get_registry(registry).disable_color_all()
