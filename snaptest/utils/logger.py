import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Configure snaptest logging.

    Library code never calls this; it is invoked by the CLI entry point so
    that importing snaptest inside a test suite leaves the host's logging alone.

    Args:
        level: Logging level for the ``snaptest`` logger tree
        log_file: Optional path to a rotating log file
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("snaptest")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name."""
    return logging.getLogger(f"snaptest.{name}")
