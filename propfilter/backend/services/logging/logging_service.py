import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .formatters.color_formatter import DEFAULT_DATEFMT, ColorFormatter
from ....utils.color_support import color_support


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5MB
    backup_count: int = 3,
    force_color: Optional[bool] = None,
    preserve_existing_handlers: bool = False,
) -> None:
    """
    Configure the root logger for the command line tool.

    Args:
        verbose: Log DEBUG messages, including skipped filter entries
        log_file: Optional path of a rotating log file
        max_bytes: Size at which the log file is rotated
        backup_count: Number of rotated log files to keep
        force_color: Force (True) or disable (False) coloured console output,
            None keeps automatic detection
        preserve_existing_handlers: Keep handlers that are already installed
    """
    color_support.set_force_color(force_color)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not preserve_existing_handlers:
        root_logger.handlers.clear()

    has_console = any(
        isinstance(handler, logging.StreamHandler)
        and getattr(handler, 'stream', None) in (sys.stdout, sys.stderr)
        for handler in root_logger.handlers
    )
    if not has_console:
        # stdout carries the command results
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ColorFormatter())
        root_logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding='utf-8',
            )
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s [%(levelname)s] %(name)s: %(message)s',
                datefmt=DEFAULT_DATEFMT,
            ))
            root_logger.addHandler(file_handler)
            logging.debug("Log file initialized: %s", log_file)
        except OSError as e:
            logging.error("Failed to initialize log file %s: %s", log_file, e)

    logging.debug(
        "Color support: %s (%s)",
        color_support.supports_color(),
        "forced" if force_color is not None else "auto",
    )
