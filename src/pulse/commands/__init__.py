from __future__ import annotations
from typing import Any, Callable, Dict, List
import argparse
import importlib
import json
import pkgutil

from ..console import println

# Registry stores callables that will attach themselves to argparse subparsers.
# Each "registrar" is a function with signature: registrar(subparsers) -> None
_REGISTRY: List[Callable] = []

def register(registrar: Callable) -> Callable:
    """Decorator to add a subcommand registrar to the global registry."""
    if registrar not in _REGISTRY:
        _REGISTRY.append(registrar)
    return registrar

def autodiscover() -> None:
    """
    Import all submodules under pulse.commands so their @register decorators run.
    Safe to call multiple times (subsequent imports are no-ops).
    """
    package_name = __name__  # "pulse.commands"
    for module_info in pkgutil.iter_modules(__path__):  # type: ignore[name-defined]
        importlib.import_module(f"{package_name}.{module_info.name}")

def get_registry() -> List[Callable]:
    return list(_REGISTRY)


def add_format_flag(parser: argparse.ArgumentParser) -> None:
    # SUPPRESS keeps the root --format value unless the flag is given here
    parser.add_argument("--format", choices=["text", "json"], default=argparse.SUPPRESS)


def output_format(args) -> str:
    """CLI flag > config/env > "text"."""
    fmt = getattr(args, "format", None)
    if fmt:
        return fmt
    cfg = getattr(args, "_pulse_config", None)
    return getattr(cfg, "format", None) or "text"


def emit(args, command: str, payload: Dict[str, Any], lines: List[str]) -> None:
    if output_format(args) == "json":
        body = {"ok": True, "command": command}
        body.update(payload)
        println(json.dumps(body, ensure_ascii=False, separators=(",", ":")))
    else:
        for line in lines:
            println(line)
