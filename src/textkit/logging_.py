"""Logging utilities.

We use Python's standard `logging` module with a plain structured format.

- Library code only creates `textkit.*` loggers; it never configures handlers.
- The CLI calls `setup_logging()`: concise lines to stderr and, when a log
  directory is configured, a full copy in `<log_dir>/<run_id>.log`.
"""

from __future__ import annotations
import logging
import os
from typing import Optional

FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATEFMT = "%Y-%m-%dT%H:%M:%S"
CONSOLE_HANDLER = "textkit.console"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in logger.handlers)


def setup_logging(run_id: str = "textkit", log_dir: Optional[str] = None, level: int = logging.INFO) -> Optional[str]:
    """
    Setup logging configuration. Calling it again does not attach duplicate handlers.

    Args:
        run_id: Run identifier, used as the log file name
        log_dir: Directory for the log file (console only if None)
        level: Root log level

    Returns:
        Path of the log file, or None when logging to console only
    """
    root = logging.getLogger()
    root.setLevel(level)

    fmt = logging.Formatter(fmt=FORMAT, datefmt=DATEFMT)

    # Console
    if not _has_handler(root, CONSOLE_HANDLER):
        ch = logging.StreamHandler()
        ch.set_name(CONSOLE_HANDLER)
        ch.setFormatter(fmt)
        root.addHandler(ch)

    if log_dir is None:
        return None

    # File
    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, f"{run_id}.log")
    file_handler = f"textkit.file:{os.path.abspath(log_path)}"
    if not _has_handler(root, file_handler):
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.set_name(file_handler)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    return log_path
