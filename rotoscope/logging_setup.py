"""Logging bootstrap for the rotoscope command line.

Levels are resolved once and applied to the ``rotoscope`` package logger.
The root logger only gets a handler when nothing else configured one.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping, Optional

PACKAGE_LOGGER = "rotoscope"
LEVEL_ENV = "ROTO_LOG_LEVEL"

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATEFMT = "%H:%M:%S"


def resolve_level(args: Any = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Pick the log level for a run.

    Priority (highest first):
    - env ROTO_LOG_LEVEL (a level name such as ERROR or DEBUG)
    - --quiet (WARNING); wins over --verbose when both are given
    - --verbose (DEBUG)
    - default: INFO
    """
    env = os.environ if environ is None else environ
    name = str(env.get(LEVEL_ENV, "") or "").strip().upper()
    if name == "WARN":
        name = "WARNING"
    level = logging.getLevelName(name) if name else None
    if isinstance(level, int):
        return level

    if getattr(args, "quiet", False):
        return logging.WARNING
    if getattr(args, "verbose", False):
        return logging.DEBUG
    return logging.INFO


def setup_logging(args: Any = None) -> int:
    """Configure logging for the rotoscope package.

    Returns:
        The level applied to the package logger
    """
    level = resolve_level(args)

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=FORMAT, datefmt=DATEFMT)

    pkg = logging.getLogger(PACKAGE_LOGGER)
    pkg.setLevel(level)
    pkg.debug("logging initialized (level=%s)", logging.getLevelName(level))
    return level
