"""Logging setup for the command line front-end.

The codec modules only ever log through ``logging.getLogger(__name__)``; this
module is what attaches handlers when running as a tool.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False, log_path: Optional[Path] = None) -> Optional[str]:
    """Configure root logging to stderr and, optionally, a log file.

    Returns the log file path when one could be opened.
    """

    level = logging.DEBUG if verbose else logging.WARNING
    root = logging.getLogger()

    # Don't clobber an existing logging configuration (e.g. when embedded).
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=[logging.StreamHandler(sys.stderr)])
    else:
        root.setLevel(level)

    if log_path is None:
        return None

    try:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), mode="a", encoding="utf-8")
    except OSError:
        logging.getLogger(__name__).warning("Could not open log file %s", log_path, exc_info=True)
        return None

    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(fh)
    return str(log_path)
