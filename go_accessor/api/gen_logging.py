"""
Diagnostics for accessor runs.

Every module logs through a child of the "accessor" logger:

    from go_accessor.api.gen_logging import get_logger
    logger = get_logger(__name__)

Nothing is printed until the CLI calls configure_gen_logging(); messages then
go to stderr with an "accessor: " prefix, the way go generate tools report.
"""

import logging
import sys

_LOGGER_NAME = "accessor"


def get_logger(name: str = None) -> logging.Logger:
    """Logger for a module: "go_accessor.api.generator" becomes "accessor.generator"."""
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    return logging.getLogger(f"{_LOGGER_NAME}.{name.rsplit('.', 1)[-1]}")


def _level_for(verbose: bool, quiet: bool) -> int:
    # -v wins over -q when both are given.
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def configure_gen_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Attach the stderr handler and set the run's verbosity.

    DEBUG lists every file parsed and every field walked, INFO reports the
    files written, WARNING only shows skipped tags. Calling it again changes
    the level of the handler already attached instead of adding another one.
    """
    level = _level_for(verbose, quiet)
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            handler.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_PrefixFormatter())
    logger.addHandler(handler)
    logger.propagate = False


class _PrefixFormatter(logging.Formatter):
    """Prefixes each message with the tool name."""

    def format(self, record: logging.LogRecord) -> str:
        return f"{_LOGGER_NAME}: {record.getMessage()}"
