import logging
import sys

import coloredlogs

from bulbosc.const import LOG_LEVELS

FORMAT_DATE = "%Y-%m-%d"
FORMAT_TIME = "%H:%M:%S"
FORMAT_DATETIME = f"{FORMAT_DATE} {FORMAT_TIME}"
FMT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s.%(funcName)s:%(lineno)d ─ %(message)s"


def enable_logging(log_level: LOG_LEVELS) -> None:
    """Set up the logging"""

    logger = logging.getLogger("bulbosc")

    # don't propagate to root, a basicConfig on root shouldn't duplicate our lines
    logger.propagate = False

    logger.handlers.clear()

    # NOTSET on the handler so only the logger's own level clamps child logs
    coloredlogs.install(level=logging.NOTSET, logger=logger, fmt=FMT, datefmt=FORMAT_DATETIME, stream=sys.stdout)

    # coloredlogs.install resets the logger level, put ours back
    logger.setLevel(log_level)

    logging.captureWarnings(True)

    # Suppress overly verbose logs from libraries that aren't helpful
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("pythonosc").setLevel(logging.WARNING)
