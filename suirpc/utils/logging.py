"""Loguru helpers for turning suirpc logging on and off."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

_SINK_IDS: dict[str, int] = {}


def get_log_dir() -> Path:
    return Path.home() / ".suirpc" / "logs"


def configure_logging(verbose: bool = False, log_file: str | None = None, level: str = "DEBUG") -> Path | None:
    """
    Enable or disable the ``suirpc`` logger.

    The library is silent by default. ``verbose`` enables it for whatever sinks
    the application has configured; ``log_file`` additionally adds a rotating
    file sink under ``~/.suirpc/logs`` (added once per name).
    """
    if verbose or log_file:
        logger.enable("suirpc")
    else:
        logger.disable("suirpc")
        return None
    if not log_file:
        return None
    log_dir = get_log_dir()
    log_path = log_dir / f"{log_file}.log"
    if log_file in _SINK_IDS:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    sink_id = logger.add(
        str(log_path),
        level=level,
        filter="suirpc",
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    _SINK_IDS[log_file] = sink_id
    return log_path
