"""
Logger configuration for the MCSE command-line tools.
Console output always; optional daily-rotating log file (midnight).
Library modules only call logging.getLogger(__name__) and never add handlers.
"""
import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: str | None = None) -> logging.Logger:
    """
    Configure the root logger with a console handler and, if log_file is
    given, a TimedRotatingFileHandler.  Returns the package logger ('MCSE').
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.DEBUG if verbose else logging.WARNING)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = TimedRotatingFileHandler(path, when="midnight", backupCount=7, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logger = logging.getLogger("MCSE")
    logger.setLevel(logging.DEBUG)
    return logger
