"""
Logging configuration for the CLI.
Everything goes to stderr so command output stays clean.
"""

import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """Plain ``[level] logger: message`` lines, coloured on a terminal."""

    def format(self, record: logging.LogRecord) -> str:
        line = f"[{record.levelname.lower()}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        if sys.stderr.isatty():
            return f"\033[0;36m{line}\033[0m"
        return line


def setup_logging(level: str = "INFO", debug: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: Level name used unless ``debug`` is set
        debug: Force DEBUG level
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else getattr(logging, level.upper(), logging.INFO))

    # Clear any existing handlers
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)

    # Request-level chatter from the HTTP client stays out of the way
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
