from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .errors import INVALID_PATH, PulseError, Result, not_found

logger = logging.getLogger("pulse.env")

# Receiving buffer size of the OS "get current directory" call.
MAX_PATH_LENGTH = 1024

CWD_ERROR_MESSAGE = "Could not get current working directory."
HOME_ERROR_MESSAGE = "Could not get home directory."

_EXTENDED_PREFIX = "\\\\?\\"


def home_variable() -> str:
    return "USERPROFILE" if os.name == "nt" else "HOME"


def resolve_cwd() -> Result:
    """
    Resolve the process working directory.

    Paths whose encoded length reaches MAX_PATH_LENGTH are reported as
    NotFound instead of being truncated.
    """
    try:
        cwd = os.getcwd()
    except OSError as e:
        logger.debug("getcwd failed: %s", e)
        return Result.failure(not_found(CWD_ERROR_MESSAGE))

    if not cwd or len(os.fsencode(cwd)) >= MAX_PATH_LENGTH:
        logger.debug("Working directory does not fit in %d bytes", MAX_PATH_LENGTH)
        return Result.failure(not_found(CWD_ERROR_MESSAGE))

    return Result.success(cwd)


def resolve_home() -> Result:
    var = home_variable()
    home = os.environ.get(var)
    if not home:
        logger.debug("%s is unset or empty", var)
        return Result.failure(not_found(HOME_ERROR_MESSAGE))
    return Result.success(home)


def get_cwd() -> str:
    return resolve_cwd().unwrap()


def get_home() -> str:
    return resolve_home().unwrap()


def _strip_extended_prefix(path: str) -> str:
    if path.startswith(_EXTENDED_PREFIX):
        return path[len(_EXTENDED_PREFIX):]
    return path


def normalize_path(path: str, root: Optional[str] = None) -> str:
    """
    Return the canonical absolute form of ``path``.

    Relative paths are anchored at ``root``, or at the current working
    directory when no root is given. The path must exist.
    """
    if not path:
        raise PulseError(INVALID_PATH, "Path must not be empty.")

    p = Path(path)
    if not p.is_absolute():
        base = root if root is not None else get_cwd()
        p = Path(base) / p

    try:
        resolved = p.resolve(strict=True)
    except FileNotFoundError:
        raise not_found(f"Path does not exist: {path}") from None
    except (OSError, RuntimeError) as e:
        # symlink loops surface as RuntimeError before Python 3.13
        raise PulseError(INVALID_PATH, f"Cannot resolve {path}: {getattr(e, 'strerror', None) or e}") from e

    out = _strip_extended_prefix(str(resolved))
    logger.debug("Normalized %s -> %s", path, out)
    return out


def describe() -> dict:
    """Both directories as a mapping; raises on the first one that fails."""
    return {"cwd": get_cwd(), "home": get_home()}
