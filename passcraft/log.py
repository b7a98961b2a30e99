"""
log.py - File logging for the application.

Modules log through logging.getLogger(__name__). This only wires up where the
records go: one timestamped file per run under the given directory, keeping
the newest MAX_LOG_FILES files. Log messages never include passwords or seeds.
"""

import logging
import os
from datetime import datetime
from typing import Optional

MAX_LOG_FILES = 10
LOG_PREFIX = "passcraft_"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def init_logging(log_dir: str, level: int = logging.INFO, now: Optional[datetime] = None) -> str:
    """
    Attach a file handler to the "passcraft" logger.

    Args:
        log_dir: Directory for log files, created if missing
        level: Minimum level written
        now: Timestamp used in the file name, defaults to now

    Returns:
        Path of the log file for this run
    """
    os.makedirs(log_dir, exist_ok=True)
    stamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    log_path = os.path.join(log_dir, f"{LOG_PREFIX}{stamp}.log")

    handler = logging.FileHandler(log_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger = logging.getLogger("passcraft")
    logger.setLevel(level)
    logger.addHandler(handler)

    cleanup_old_logs(log_dir, MAX_LOG_FILES)
    return log_path


def cleanup_old_logs(log_dir: str, keep: int = MAX_LOG_FILES) -> list:
    """Delete all but the newest `keep` log files. Returns the removed paths."""
    logs = sorted(
        name for name in os.listdir(log_dir)
        if name.startswith(LOG_PREFIX) and name.endswith(".log")
    )
    # Names embed a sortable timestamp, so oldest come first
    stale = logs[:-keep] if keep > 0 else logs
    removed = []
    for name in stale:
        path = os.path.join(log_dir, name)
        os.remove(path)
        removed.append(path)
    return removed
