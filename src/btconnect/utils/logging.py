from __future__ import annotations

import os

import coloredlogs  # type: ignore[import]

LEVEL_ENV_VAR = "LOGLEVEL"
DATE_FORMAT = "%H:%M:%S"


class LogFormat:
    SIMPLE = "%(asctime)s %(levelname)s %(message)s"
    # parser and source debugging needs the emitting module
    DETAILED = (
        "%(asctime)s [%(name)s] %(filename)s:%(lineno)d %(levelname)s %(message)s"
    )


def resolve_level(level: str | None = None) -> str:
    return (level or os.environ.get(LEVEL_ENV_VAR, "INFO")).upper()


def setup_logging(level: str | None = None) -> str:
    """Install coloredlogs on the root logger and return the level used."""
    resolved = resolve_level(level)
    fmt = LogFormat.DETAILED if resolved == "DEBUG" else LogFormat.SIMPLE

    coloredlogs.install(level=resolved, fmt=fmt, datefmt=DATE_FORMAT)
    return resolved
