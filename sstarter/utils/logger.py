import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FILE_NAME = "sstarter.log"

# Set once the file handler is attached
_CONFIGURED = False


def configure_logging(sstarter_home: Path | None = None, level: int = logging.INFO) -> None:
    """Attach the rotating ``sstarter.log`` handler to the ``sstarter`` logger.

    Later calls only adjust the level, so the CLI can raise verbosity after
    tests or library callers have already configured a home directory.

    Args:
        sstarter_home: Directory receiving ``sstarter.log``; SSTARTER_HOME (or ~/.sstarter) when None
        level: Level for the ``sstarter`` logger
    """
    global _CONFIGURED
    logger = logging.getLogger("sstarter")
    logger.setLevel(level)
    if _CONFIGURED:
        return

    if sstarter_home is None:
        from ..api.config.get_home_dir import get_home_dir

        sstarter_home = get_home_dir()
    sstarter_home.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(sstarter_home / LOG_FILE_NAME, maxBytes=5 * 1024 * 1024, backupCount=3)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Logger ``sstarter.<name>``, configuring the file handler on first use."""
    if not _CONFIGURED:
        configure_logging()
    return logging.getLogger(f"sstarter.{name}")
