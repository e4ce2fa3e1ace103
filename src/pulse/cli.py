from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from . import __version__
from .commands import get_registry, autodiscover, output_format
from .config import load_config
from .console import println
from .errors import PulseError, EXIT_USAGE, EXIT_RUNTIME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pulse",
        description="Pulse environment command-line interface.",
    )

    # Global/root flags
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Override log level (default from env/config).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log everything (same as --log-level DEBUG).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a TOML config file to use (highest precedence).",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pulse {__version__}",
        help="Show version and exit.",
    )
    parser.add_argument(
        "--format",
        default=None,
        choices=["text", "json"],
        help="Output format for command results (default from env/config, else text).",
    )

    subparsers = parser.add_subparsers(
        title="subcommands",
        dest="subcommand",
        metavar="<command>",
        required=False,
    )
    # Import all subcommand modules so they @register
    autodiscover()

    for registrar in get_registry():
        registrar(subparsers)

    return parser


def _configure_logging(verbose: bool, cli_level_name: Optional[str], cfg_level_name: Optional[str]) -> None:
    # Precedence: --verbose > CLI > ENV > CONFIG > default(WARNING)
    level_name = (
        ("DEBUG" if verbose else "")
        or (cli_level_name or "").strip()
        or (os.getenv("PULSE_LOG_LEVEL") or "").strip()
        or (cfg_level_name or "").strip()
        or "WARNING"
    )
    level = getattr(logging, level_name.upper(), logging.WARNING)

    # force=True so repeated in-process runs reconfigure handlers
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _report_error(args: argparse.Namespace, err: PulseError) -> None:
    logging.getLogger("pulse").error(str(err))
    if output_format(args) == "json":
        payload = {
            "ok": False,
            "command": getattr(args, "command", None) or getattr(args, "subcommand", None),
            "kind": err.kind,
            "message": err.message,
        }
        println(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def run_cli(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load effective config once, attach to args so subcommands can use it
    cfg, sources = load_config(args.config)
    setattr(args, "_pulse_config", cfg)
    setattr(args, "_pulse_sources", sources)

    _configure_logging(args.verbose, args.log_level, cfg.log_level)

    if not hasattr(args, "func"):
        parser.print_help(sys.stderr)
        return EXIT_USAGE

    try:
        return int(args.func(args))
    except PulseError as e:
        _report_error(args, e)
        return e.code
    except KeyboardInterrupt:
        logging.getLogger("pulse").error("Interrupted.")
        return 130
    except Exception as e:
        logging.getLogger("pulse").exception("Unexpected error: %s", e)
        return EXIT_RUNTIME
