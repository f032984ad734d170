"""
Environment-driven configuration for wxlog.

The CLI builds a StoreConfig from the environment once per invocation; library
code only ever receives the config object, never reads os.environ itself.
"""
from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

from wxlog.models import DEFAULT_FIELDS, DEFAULT_NUMERIC_FIELD, DEFAULT_STORE_PATH, StoreConfig


def _get_list(env: Mapping[str, str], name: str, default):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return tuple(default)
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def load_config(env: Optional[Mapping[str, str]] = None) -> StoreConfig:
    """Build a StoreConfig from WXLOG_* variables (defaults to os.environ)."""
    env = os.environ if env is None else env
    # unset -> default; explicitly empty -> no numeric total
    numeric = env.get("WXLOG_NUMERIC_FIELD")
    return StoreConfig(
        fields=_get_list(env, "WXLOG_FIELDS", DEFAULT_FIELDS),
        numeric_field=DEFAULT_NUMERIC_FIELD if numeric is None else numeric.strip(),
        path=env.get("WXLOG_STORE_PATH") or DEFAULT_STORE_PATH,
    )


def log_level(env: Optional[Mapping[str, str]] = None, verbose: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    env = os.environ if env is None else env
    name = (env.get("WXLOG_LOG_LEVEL") or "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
