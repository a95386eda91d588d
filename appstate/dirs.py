"""Per-user directory resolution.

Roots come from ``appdirs`` unless overridden through ``APPSTATE_CONFIG_HOME``
or ``APPSTATE_DATA_HOME``. The organization and application components are
always appended here so the layout is identical on every platform::

    <root>/<organization>/<application>/
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

import appdirs

from appstate.exceptions import DirectoryResolutionError, StateIOError
from appstate.logger import get_logger
from appstate.settings import load_settings

logger = get_logger(__name__)

CONFIG = "config"
DATA = "data"


def _resolve_root(kind: str, override: Optional[Path], lookup: Callable[[], str]) -> Path:
    if override is not None:
        return override

    try:
        raw = lookup()
    except (KeyError, OSError, RuntimeError, ValueError) as e:
        raise DirectoryResolutionError(
            f"Cannot resolve the per-user {kind} directory: {e}", kind=kind
        ) from e

    # expanduser() leaves "~" in place when no home directory is known
    if not raw or raw.startswith("~"):
        raise DirectoryResolutionError(
            f"Cannot resolve the per-user {kind} directory (got {raw!r})", kind=kind
        )
    return Path(raw)


def config_root() -> Path:
    """Return the per-user configuration root, e.g. ``~/.config``."""
    return _resolve_root(CONFIG, load_settings().config_home, appdirs.user_config_dir)


def data_root() -> Path:
    """Return the per-user data root, e.g. ``~/.local/share``."""
    return _resolve_root(DATA, load_settings().data_home, appdirs.user_data_dir)


def ensure_directory(directory: Path) -> Path:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StateIOError(
            f"Cannot create directory {directory}: {e}",
            path=directory,
            operation="create directory",
            errno=e.errno,
        ) from e
    return directory


def ensure_config_dir(organization: str, application: str) -> Path:
    directory = config_root() / organization / application
    logger.debug(f"Config directory for {organization}/{application}: {directory}")
    return ensure_directory(directory)


def ensure_data_dir(organization: str, application: str) -> Path:
    directory = data_root() / organization / application
    logger.debug(f"Data directory for {organization}/{application}: {directory}")
    return ensure_directory(directory)
