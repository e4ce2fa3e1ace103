from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Tuple, Optional, Any
import logging
import os

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore

from .env import resolve_cwd, resolve_home

logger = logging.getLogger("pulse.config")

FORMATS = ("text", "json")


@dataclass
class Config:
    log_level: Optional[str] = None  # e.g., "INFO", "DEBUG"
    format: str = "text"


def _read_toml(path: Path) -> Dict[str, Any]:
    with path.open("rb") as f:
        return tomllib.load(f)


def _set_format(cfg: Config, sources: Dict[str, str], value: Any, label: str) -> None:
    if isinstance(value, str) and value.lower() in FORMATS:
        cfg.format = value.lower()
        sources["format"] = label
    elif value is not None:
        logger.warning("Ignoring unknown output format %r from %s", value, label)


def _apply_from_mapping(cfg: Config, sources: Dict[str, str], mapping: Dict[str, Any], label: str) -> None:
    # log level either top-level "log_level" or table [logging].level
    if isinstance(mapping.get("log_level"), str):
        cfg.log_level = mapping["log_level"].upper()
        sources["log_level"] = label

    logging_tbl = mapping.get("logging")
    if isinstance(logging_tbl, dict):
        level = logging_tbl.get("level")
        if isinstance(level, str):
            cfg.log_level = level.upper()
            sources["log_level"] = label

    # output format either top-level "format" or table [output].format
    _set_format(cfg, sources, mapping.get("format"), label)
    output_tbl = mapping.get("output")
    if isinstance(output_tbl, dict):
        _set_format(cfg, sources, output_tbl.get("format"), label)


def _apply_file(cfg: Config, sources: Dict[str, str], path: Path, label: str) -> None:
    if not path.is_file():
        return
    try:
        mapping = _read_toml(path)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Skipping unreadable config %s: %s", path, e)
        return
    _apply_from_mapping(cfg, sources, mapping, label)


def _user_config_path() -> Optional[Path]:
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pulse" / "config.toml"
    home = resolve_home()
    if not home.ok:
        logger.debug("No home directory; skipping user config (%s)", home.error)
        return None
    return Path(home.value) / ".config" / "pulse" / "config.toml"


def _project_config_path() -> Optional[Path]:
    cwd = resolve_cwd()
    if not cwd.ok:
        logger.debug("No working directory; skipping project config (%s)", cwd.error)
        return None
    return Path(cwd.value) / "pulse.toml"


def load_config(override_path: Optional[str] = None) -> Tuple[Config, Dict[str, str]]:
    """
    Precedence:
    defaults < user < project < override file < env
    (CLI flags are handled in cli.py and beat all of these.)
    """
    cfg = Config()
    sources: Dict[str, str] = {"log_level": "default", "format": "default"}

    u = _user_config_path()
    if u is not None:
        _apply_file(cfg, sources, u, "user")

    p = _project_config_path()
    if p is not None:
        _apply_file(cfg, sources, p, "project")

    if override_path:
        op = Path(override_path)
        if not op.exists():
            logger.warning("Config file %s does not exist", op)
        _apply_file(cfg, sources, op, f"override:{op}")

    # env (highest among config sources)
    if os.environ.get("PULSE_LOG_LEVEL"):
        cfg.log_level = os.environ["PULSE_LOG_LEVEL"].upper()
        sources["log_level"] = "env:PULSE_LOG_LEVEL"

    if os.environ.get("PULSE_FORMAT"):
        _set_format(cfg, sources, os.environ["PULSE_FORMAT"], "env:PULSE_FORMAT")

    return cfg, sources
