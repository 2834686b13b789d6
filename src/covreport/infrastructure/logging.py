"""Logging setup for covreport.

Library modules log through `from loguru import logger` and never
configure sinks. configure_logging() is the entry point for applications
embedding covreport, exported as `covreport.configure_logging`; call it
once at startup, before generate_reports().

Usage:
    >>> from covreport import configure_logging
    >>> configure_logging(verbose=True)
"""

from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<level>{level: <7}</level>| <dim><cyan>{name}:{line}</cyan></dim> | <level>{message}</level>"


def configure_logging(verbose: bool = False) -> int:
    """Replace loguru handlers with a single stderr sink.

    Idempotent: previous handlers are removed on every call.

    Args:
        verbose: DEBUG level if True, INFO otherwise.

    Returns:
        Handler id of the installed sink.
    """
    logger.remove()
    return logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level="DEBUG" if verbose else "INFO",
        colorize=None,
        backtrace=verbose,
        diagnose=verbose,
    )
