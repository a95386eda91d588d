"""Runtime settings for appstate, read from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

CONFIG_HOME_VAR = "APPSTATE_CONFIG_HOME"
DATA_HOME_VAR = "APPSTATE_DATA_HOME"
LOG_LEVEL_VAR = "APPSTATE_LOG_LEVEL"


@dataclass(frozen=True)
class StoreSettings:
    config_home: Optional[Path] = None  # Replaces the per-user config root
    data_home: Optional[Path] = None  # Replaces the per-user data root
    log_level: str = "INFO"


def _path_or_none(value: Optional[str]) -> Optional[Path]:
    if value is None or not value.strip():
        return None
    return Path(value.strip()).expanduser()


def load_settings(environ: Optional[Mapping[str, str]] = None) -> StoreSettings:
    """Build settings from environment variables.

    Settings are read on every call so that changes to the environment take
    effect without restarting the process.
    """
    environ = os.environ if environ is None else environ
    level = (environ.get(LOG_LEVEL_VAR) or "").strip() or "INFO"
    return StoreSettings(
        config_home=_path_or_none(environ.get(CONFIG_HOME_VAR)),
        data_home=_path_or_none(environ.get(DATA_HOME_VAR)),
        log_level=level.upper(),
    )
