# propfilter/backend/services/logging/formatters/color_formatter.py

import logging
from typing import Dict, Optional, Tuple

from colorama import Fore

from .....utils.color_support import color_support

DEFAULT_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DEFAULT_DATEFMT = '%Y-%m-%d %H:%M:%S'


class ColorFormatter(logging.Formatter):
    """Formatter that colours the level name and message per log level."""

    # level -> (colour, bright)
    LEVEL_STYLES: Dict[int, Tuple[str, bool]] = {
        logging.DEBUG: (Fore.CYAN, False),
        logging.INFO: (Fore.GREEN, False),
        logging.WARNING: (Fore.YELLOW, True),
        logging.ERROR: (Fore.RED, True),
        logging.CRITICAL: (Fore.MAGENTA, True),
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None):
        super().__init__(fmt or DEFAULT_FORMAT, datefmt or DEFAULT_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        if not color_support.supports_color():
            return super().format(record)

        orig_msg = record.msg
        orig_levelname = record.levelname
        color, bright = self.LEVEL_STYLES.get(record.levelno, (None, False))
        try:
            record.levelname = color_support.colored(record.levelname, color, bright)
            if isinstance(record.msg, str):
                record.msg = color_support.colored(record.msg, color)
            return super().format(record)
        finally:
            # Other handlers must see the record unchanged
            record.msg = orig_msg
            record.levelname = orig_levelname
