"""Environment configuration helpers.

Purpose
-------
Centralise how configuration reaches the runtime: keyword arguments first,
environment variables on top, and an optional ``.env`` file that only fills
variables the environment does not already define.

Contents
--------
* :data:`DOTENV_ENV_VAR` - toggle enabling ``.env`` loading.
* :func:`should_use_dotenv` / :func:`enable_dotenv` - ``.env`` handling via
  ``python-dotenv``.
* :func:`env_bool` / :func:`parse_console_colors` / :func:`merge_console_colors`
  - parsing helpers shared by :func:`lib_log_compact.init` and the CLI.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import find_dotenv, load_dotenv

from lib_log_compact.domain.levels import LogLevel

DOTENV_ENV_VAR = "LOG_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_LOADED: Path | None = None


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> import os
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether ``.env`` loading is enabled; an explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file without overriding existing variables.

    The search starts in ``search_from`` (default: the working directory) and
    walks up the parents. Returns the loaded path, or ``None`` when no file
    was found. Loading happens at most once per process.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED is not None:
        return _DOTENV_LOADED

    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        candidate = next(
            (directory / ".env" for directory in (search_from, *search_from.parents) if (directory / ".env").is_file()),
            None,
        )
    if candidate is None:
        return None

    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_LOADED = resolved
    return resolved


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


def parse_console_colors(raw: str | None) -> dict[str, str]:
    """Convert ``LEVEL=style`` comma-separated strings into a dictionary.

    Examples
    --------
    >>> parse_console_colors('INFO=black on green, ERROR = white on red')
    {'INFO': 'black on green', 'ERROR': 'white on red'}
    >>> parse_console_colors(None)
    {}
    """
    if not raw:
        return {}
    result: dict[str, str] = {}
    for chunk in raw.split(","):
        if "=" not in chunk:
            continue
        key, value = chunk.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key or not value:
            continue
        result[key] = value
    return result


def merge_console_colors(
    explicit: Mapping[str | LogLevel, str] | None,
    env_colors: Mapping[str, str],
) -> dict[str, str]:
    """Combine code-supplied colours with environment overrides.

    Keys are normalised to canonical level names; environment values win.

    Examples
    --------
    >>> merge_console_colors({'INFO': 'cyan'}, {'info': 'green', 'warn': 'red'})
    {'INFO': 'green', 'WARNING': 'red'}
    """
    merged: dict[str, str] = {}

    def _normalise_key(key: str | LogLevel) -> str:
        if isinstance(key, LogLevel):
            return key.name
        return LogLevel.from_name(key).name

    if explicit:
        for key, value in explicit.items():
            merged[_normalise_key(key)] = value
    for key, value in env_colors.items():
        merged[_normalise_key(key)] = value
    return merged


__all__ = [
    "DOTENV_ENV_VAR",
    "enable_dotenv",
    "env_bool",
    "merge_console_colors",
    "parse_console_colors",
    "should_use_dotenv",
]
