"""Debug logging for specs that write their matcher results to a file."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

_FORMATTER = logging.Formatter(fmt="[%(asctime)s] %(message)s", datefmt="%Y-%m-%dT%H:%M:%S")


def spec_logger_name(description: str, token: int) -> str:
    """Logger name unique to one spec, e.g. ``expectkit_spec_adds_numbers_7f3a``.

    *token* disambiguates specs sharing a description (callers pass ``id(spec)``).
    """
    slug = re.sub(r"[^a-z0-9]+", "_", description.lower()).strip("_") or "spec"
    return f"expectkit_spec_{slug}_{token:x}"


def close_logger(logger: logging.Logger) -> None:
    """Close and detach every handler so no file stays open."""
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def setup_logger(debug_file: Path, verbose: bool = False, logger_name: str = "expectkit") -> logging.Logger:
    """Return a DEBUG logger that writes to *debug_file*, and to stderr when *verbose*.

    Calling it again with the same name replaces (and closes) the previous
    handlers. The logger does not propagate, so results written for one
    spec never reach another spec's file through a shared ancestor.
    """
    logger = logging.getLogger(logger_name)
    close_logger(logger)

    logger.disabled = False
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    debug_file.parent.mkdir(parents=True, exist_ok=True)
    handlers: list[logging.Handler] = [logging.FileHandler(debug_file, mode="a")]
    if verbose:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(_FORMATTER)
        logger.addHandler(handler)

    return logger
