#!/usr/bin/env python3
"""Convenience entry point.

The codec lives in the `showdex_hydro` package; this wrapper lets the CLI run
straight from a checkout.
"""

from showdex_hydro.api import *  # re-export for convenience
from showdex_hydro.cli import main as _main


if __name__ == "__main__":
    raise SystemExit(_main())
