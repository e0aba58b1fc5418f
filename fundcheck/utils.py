import logging
import sys
from enum import IntEnum
from typing import List, Optional

VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Severity(IntEnum):
    DEBUG = logging.DEBUG
    VERBOSE = VERBOSE
    INFO = logging.INFO
    ERROR = logging.ERROR


def threshold(verbose: bool = False, debug: bool = False) -> Severity:
    """Lowest severity a sink accepts under the given opt-ins."""
    if debug:
        return Severity.DEBUG
    if verbose:
        return Severity.VERBOSE
    return Severity.INFO


def console_sink(level: Severity, stream=None) -> logging.Handler:
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    return handler


def file_sink(path: str, level: Severity) -> logging.Handler:
    # append-only; never rotated
    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    return handler


def setup_logging(
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
    stream=None,
) -> List[logging.Handler]:
    """Configure root logging with a console sink and an optional file sink."""
    level = threshold(verbose, debug)
    logger = logging.getLogger()
    logger.setLevel(level)

    # Clear existing handlers to honor verbosity changes
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    handlers = [console_sink(level, stream)]
    if log_file:
        handlers.append(file_sink(log_file, level))
    for h in handlers:
        logger.addHandler(h)
    return handlers


def log_verbose(logger: logging.Logger, msg: str, *args) -> None:
    logger.log(VERBOSE, msg, *args)
