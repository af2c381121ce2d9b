# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""Common configuration constants and functions."""

import os
import sys
from pathlib import Path
from typing import Callable, Optional, TypeVar

ENV_PREFIX = "PHC_TOKEN_"
ROOT_DIR = Path(__file__).parent.parent.parent.resolve()
DOT_ENV_PATH = ROOT_DIR / ".env"

TRUTHY = ("true", "1", "yes", "y", "on")
FALSY = ("false", "0", "no", "n", "off")
T = TypeVar("T")


def _from_argv(cli_key: str) -> Optional[str]:
    if cli_key not in sys.argv:
        return None
    index = sys.argv.index(cli_key) + 1
    if index < len(sys.argv):
        return sys.argv[index]
    return None


def get_value(
    cli_key: str,
    env_key: str,
    cast: Callable[[str], T],
    fallback: T,
) -> T:
    """Get a value from the command line, the environment, or a fallback.

    Parameters
    ----------
    cli_key : str
        The command line flag, e.g. ``--argon2-time-cost``
    env_key : str
        The environment variable name, without the prefix
    cast : Callable[[str], T]
        The function converting the raw text
    fallback : T
        The value used if none is found or it can not be converted

    Returns
    -------
    T
        The value
    """
    if cast is bool:
        return _get_bool(cli_key, env_key, fallback)  # type: ignore
    value_str = _from_argv(cli_key) or os.environ.get(f"{ENV_PREFIX}{env_key}")
    if not value_str:
        return fallback
    try:
        return cast(value_str)
    except (ValueError, TypeError):
        return fallback


def _get_bool(cli_key: str, env_key: str, fallback: bool) -> bool:
    stripped_key = cli_key.lstrip("-")
    if f"--no-{stripped_key}" in sys.argv:
        return False
    if f"--{stripped_key}" in sys.argv:
        return True
    from_env = os.environ.get(f"{ENV_PREFIX}{env_key}", str(fallback))
    return from_env.lower() not in FALSY


__all__ = [
    "DOT_ENV_PATH",
    "ENV_PREFIX",
    "FALSY",
    "ROOT_DIR",
    "TRUTHY",
    "get_value",
]
