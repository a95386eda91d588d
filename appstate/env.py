"""Environment variables that can be overridden by a ``.env`` file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, Optional, Union

from dotenv import dotenv_values

from appstate.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def load_env_file(path: PathLike = ".env") -> Dict[str, str]:
    """Export the pairs from a ``.env`` file into ``os.environ``.

    Lines look like ``KEY=VALUE`` (optionally quoted); ``#`` comments are
    ignored. Values from the file win over the current environment.

    Returns:
        The pairs read from the file, or a copy of the process environment
        when the file does not exist
    """
    path = Path(path)
    if not path.is_file():
        return dict(os.environ)

    values = {key: value for key, value in dotenv_values(path).items() if value is not None}
    for key, value in values.items():
        os.environ[key] = value

    logger.debug(f"Loaded {len(values)} variable(s) from {path}")
    return values


def env(key: str, path: PathLike = ".env") -> Optional[str]:
    """Look up ``key`` in the ``.env`` file first, then in the process environment."""
    values = load_env_file(path)
    if key in values:
        return values[key]
    return os.environ.get(key)
