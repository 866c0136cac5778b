"""Command line interface for the Showdex settings codec."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, List, Optional

from . import __version__
from .dehydrate import dehydrate_settings
from .header import split_header
from .hydrate import hydrate_settings
from .log_utils import configure_logging
from .model import default_settings, settings_from_dict, settings_to_dict
from .storage import SettingsStore

logger = logging.getLogger(__name__)


def _read_text(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def _print_json(data: Any, indent: int) -> None:
    print(json.dumps(data, indent=indent or None, sort_keys=False))


def _load_settings_json(source: str):
    data = json.loads(_read_text(source))
    return settings_from_dict(data)


def _store(args: argparse.Namespace) -> SettingsStore:
    if args.home:
        return SettingsStore(home=Path(args.home).expanduser())
    return SettingsStore()


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="showdex-hydro", description="Hydrate/dehydrate compact Showdex settings strings.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log skipped tokens and other debug output")
    ap.add_argument("--home", type=str, default=None, help="Storage folder (default: $SHOWDEX_HYDRO_HOME or ~/.showdex_hydro)")
    ap.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact output)")
    ap.add_argument("--log-file", type=str, default=None, help="Also append log records to this file")

    sub = ap.add_subparsers(dest="command", required=True)

    p_hydrate = sub.add_parser("hydrate", help="Print the settings encoded in a dehydrated string as JSON")
    p_hydrate.add_argument("value", help="Dehydrated settings string ('-' reads stdin)")
    p_hydrate.add_argument("--color-scheme", type=str, default=None, help="Default colour scheme of the host")

    p_dehydrate = sub.add_parser("dehydrate", help="Dehydrate a settings JSON file")
    p_dehydrate.add_argument("json_file", help="Settings JSON ('-' reads stdin); missing keys use defaults")

    p_header = sub.add_parser("header", help="Show the header metadata of a dehydrated string")
    p_header.add_argument("value", help="Dehydrated settings string ('-' reads stdin)")

    sub.add_parser("defaults", help="Print the default settings as JSON")

    p_load = sub.add_parser("load", help="Print the stored settings as JSON")
    p_load.add_argument("--raw", action="store_true", help="Print the stored string instead")

    p_save = sub.add_parser("save", help="Dehydrate a settings JSON file into storage")
    p_save.add_argument("json_file", help="Settings JSON ('-' reads stdin)")

    args = ap.parse_args(argv)
    log_path = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(verbose=args.verbose, log_path=log_path)

    try:
        if args.command == "hydrate":
            value = _read_text(args.value).strip() if args.value == "-" else args.value
            _print_json(settings_to_dict(hydrate_settings(value, color_scheme=args.color_scheme)), args.indent)

        elif args.command == "dehydrate":
            print(dehydrate_settings(_load_settings_json(args.json_file)))

        elif args.command == "header":
            value = _read_text(args.value).strip() if args.value == "-" else args.value
            header, tokens = split_header(value)
            _print_json({**asdict(header), "tokens": len(tokens)}, args.indent)

        elif args.command == "defaults":
            _print_json(settings_to_dict(default_settings()), args.indent)

        elif args.command == "load":
            store = _store(args)
            if args.raw:
                print(store.read_raw() or "")
            else:
                _print_json(settings_to_dict(store.load()), args.indent)

        elif args.command == "save":
            store = _store(args)
            value = store.save(_load_settings_json(args.json_file))
            print(f"Saved settings to {store.path()} ({len(value)} chars)")

    except (OSError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
