import sys

from huelog.config import settings
from huelog.logger import new
from huelog.logging import logger


def main() -> None:
    logger.info(
        "Starting huelog demo level={level} flags={flags} color={color}",
        level=settings.level.name,
        flags=settings.flags,
        color=settings.color,
    )

    log = new(sys.stdout, "huelog ")
    log.debug("debug message")
    log.info("info message")
    log.warn("warn message")
    log.errorf("error message: %s", "something went wrong")
    log.fatalf("fatal message: exit code %d (not exiting)", 1)


if __name__ == "__main__":  # pragma: no cover
    main()
