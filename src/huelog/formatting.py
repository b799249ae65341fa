"""Prefix and tag rendering plus message formatting."""

from huelog.levels import Level
from huelog.logging import logger

ESC = "\x1b"
RESET = f"{ESC}[0m"

# Foreground colors, rendered bold
PREFIX_COLOR = 36  # cyan
LEVEL_COLORS = {
    Level.DEBUG: 32,  # green
    Level.INFO: 34,  # blue
    Level.WARN: 33,  # yellow
    Level.ERROR: 35,  # purple
    Level.FATAL: 31,  # red
}

TAG_WIDTH = 8


def colorize(text: str, color: int) -> str:
    """Wrap text in a bold ANSI color sequence."""
    return f"{ESC}[1;{color}m{text}{RESET}"


def render_prefix(prefix: str, color: bool) -> str:
    """Render the caller-supplied prefix, colorized or plain."""
    if color:
        return colorize(prefix, PREFIX_COLOR)
    return prefix


def render_tag(level: Level, color: bool) -> str:
    """Render the severity tag left-justified to TAG_WIDTH."""
    tag = f"{level.tag:<{TAG_WIDTH}}"
    if color:
        return colorize(tag, LEVEL_COLORS[level])
    return tag


def sprint(*values: object) -> str:
    """Join values with single spaces and end the line."""
    return " ".join(str(v) for v in values) + "\n"


def sprintf(fmt: str, *values: object) -> str:
    """
    Apply printf-style substitution to ``fmt``.

    Without values ``%%`` escapes are still collapsed; a format that needs
    arguments it did not get is returned as-is. A directive and argument
    mismatch does not raise; the problem is rendered inline so the line
    still reaches the sink.
    """
    if not values:
        try:
            return fmt % ()
        except (TypeError, ValueError):
            return fmt
    # A single mapping argument feeds %(name)s directives
    args = values[0] if len(values) == 1 and isinstance(values[0], dict) else values
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as e:
        logger.warning(
            "Bad format string format={format!r} error={error}",
            format=fmt,
            error=str(e),
        )
        return f"{fmt} %!(BADFORMAT {e}) {values!r}"
