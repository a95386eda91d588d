"""Load and save typed application state in OS-appropriate per-user locations.

Settings types (human-editable YAML under the config root)::

    from dataclasses import dataclass
    from typing import ClassVar

    from appstate import Settings

    @dataclass
    class MyConfiguration(Settings):
        ORGANIZATION: ClassVar[str] = "museun"
        APPLICATION: ClassVar[str] = "foobar"
        NAME: ClassVar[str] = "config.yaml"

        name: str = "Foobar"
        attempts: int = 3
        force: bool = False

    result = MyConfiguration.load_or_default()
    if result.is_default:
        print(f"a default configuration was created at: {result.path}")

Data types work the same way with ``Data`` (JSON under the data root).
"""

from appstate.env import env, load_env_file
from appstate.exceptions import (
    AppStateError,
    ArtifactNotFoundError,
    DeserializationError,
    DirectoryResolutionError,
    InvalidIdentityError,
    SchemaValidationError,
    SerializationError,
    StateIOError,
)
from appstate.identity import Identity, identity_of
from appstate.logger import configure_logging, reset_logging
from appstate.roles import Data, Settings
from appstate.store import (
    LoadResult,
    LoadState,
    Persistent,
    directory,
    load,
    load_or_default,
    path,
    save,
)

__version__ = "0.1.0"

__all__ = [
    "AppStateError",
    "ArtifactNotFoundError",
    "Data",
    "DeserializationError",
    "DirectoryResolutionError",
    "Identity",
    "InvalidIdentityError",
    "LoadResult",
    "LoadState",
    "Persistent",
    "SchemaValidationError",
    "SerializationError",
    "Settings",
    "StateIOError",
    "configure_logging",
    "directory",
    "env",
    "identity_of",
    "load",
    "load_env_file",
    "load_or_default",
    "path",
    "reset_logging",
    "save",
]
