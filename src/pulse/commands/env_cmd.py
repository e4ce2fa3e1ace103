from __future__ import annotations
import logging
from argparse import ArgumentParser, _SubParsersAction
from ..env import describe, get_cwd, get_home
from . import register, add_format_flag, emit

logger = logging.getLogger("pulse.env_cmd")


def _run_cwd(args) -> int:
    logger.debug("Resolving working directory")
    cwd = get_cwd()
    emit(args, "cwd", {"path": cwd}, [cwd])
    logger.info("Working directory resolved")
    return 0


def _run_home(args) -> int:
    logger.debug("Resolving home directory")
    home = get_home()
    emit(args, "home", {"path": home}, [home])
    logger.info("Home directory resolved")
    return 0


def _run_env(args) -> int:
    # Both lookups happen before anything is printed: all or nothing.
    info = describe()
    emit(args, "env", info, [f"cwd: {info['cwd']}", f"home: {info['home']}"])
    logger.info("Environment resolved")
    return 0


@register
def register_env(subparsers: _SubParsersAction) -> None:
    cwd: ArgumentParser = subparsers.add_parser(
        "cwd",
        help="Print the current working directory.",
        description="Print the absolute path of the current working directory.",
    )
    add_format_flag(cwd)
    cwd.set_defaults(func=_run_cwd, command="cwd")

    home: ArgumentParser = subparsers.add_parser(
        "home",
        help="Print the home directory.",
        description="Print the current user's home directory, exactly as set in the environment.",
    )
    add_format_flag(home)
    home.set_defaults(func=_run_home, command="home")

    env: ArgumentParser = subparsers.add_parser(
        "env",
        help="Print working and home directories.",
        description="Print both the working directory and the home directory.",
    )
    add_format_flag(env)
    env.set_defaults(func=_run_env, command="env")
