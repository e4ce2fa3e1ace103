from __future__ import annotations
from argparse import ArgumentParser, _SubParsersAction
from . import register, add_format_flag, emit
from ..config import load_config


def _run_show(args) -> int:
    # Prefer config computed by cli.py; fallback to fresh load if missing
    cfg = getattr(args, "_pulse_config", None)
    sources = getattr(args, "_pulse_sources", None)
    if cfg is None or sources is None:
        cfg, sources = load_config(getattr(args, "config", None))

    payload = {
        "log_level": cfg.log_level,  # null in JSON when unset
        "format": cfg.format,
    }
    if getattr(args, "with_sources", False):
        payload["sources"] = {
            "log_level": sources.get("log_level", "default"),
            "format": sources.get("format", "default"),
        }
        lines = [
            f"log_level: {cfg.log_level or ''} (source={sources.get('log_level', 'default')})",
            f"format: {cfg.format} (source={sources.get('format', 'default')})",
        ]
    else:
        lines = [f"log_level: {cfg.log_level or ''}", f"format: {cfg.format}"]

    emit(args, "config.show", payload, lines)
    return 0


@register
def register_config(subparsers: _SubParsersAction) -> None:
    p: ArgumentParser = subparsers.add_parser(
        "config",
        help="Inspect and print effective configuration.",
        description="Show pulse configuration derived from defaults, files, and environment.",
    )
    # bare "pulse config" behaves like "pulse config show"
    p.set_defaults(func=_run_show, command="config.show")
    sp = p.add_subparsers(dest="config_cmd", metavar="<subcommand>")
    show = sp.add_parser("show", help="Show effective configuration.")
    show.add_argument("--with-sources", action="store_true", help="Include the source of each value.")
    add_format_flag(show)
    show.set_defaults(func=_run_show, command="config.show")
