"""Logging utilities.

All package loggers are children of the ``boldextract`` logger.  Nothing is
emitted unless :func:`configure_logging` installs a handler.  Repeated calls
keep a single handler so CLI invocations in one process do not duplicate
output.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER = "boldextract"
_HANDLER_ATTR = "_boldextract_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger."""

    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the root package logger.

    Calling this again replaces the handler, so there is never more than one
    and it always writes to the current ``sys.stderr``.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for existing in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER", "get_logger", "configure_logging"]
