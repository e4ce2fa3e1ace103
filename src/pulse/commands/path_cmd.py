from __future__ import annotations
import logging
from argparse import ArgumentParser, _SubParsersAction
from ..env import normalize_path
from . import register, add_format_flag, emit

logger = logging.getLogger("pulse.path")


def _run(args) -> int:
    resolved = normalize_path(args.path, root=args.root)
    emit(args, "path", {"input": args.path, "path": resolved}, [resolved])
    logger.info("Normalized %s", args.path)
    return 0


@register
def register_path(subparsers: _SubParsersAction) -> None:
    parser: ArgumentParser = subparsers.add_parser(
        "path",
        help="Print the canonical absolute form of a path.",
        description="Resolve PATH against --root (default: working directory).",
    )
    parser.add_argument("path", metavar="PATH", help="Path to normalize.")
    parser.add_argument("--root", default=None, help="Directory relative paths are anchored at.")
    add_format_flag(parser)
    parser.set_defaults(func=_run, command="path")
