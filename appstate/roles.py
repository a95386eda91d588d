"""Role capabilities: where an artifact lives and how it is encoded.

A persistable type inherits exactly one role and declares its identity::

    @dataclass
    class MyConfiguration(Settings):
        ORGANIZATION: ClassVar[str] = "museun"
        APPLICATION: ClassVar[str] = "foobar"
        NAME: ClassVar[str] = "config.yaml"

        name: str = "Foobar"
        attempts: int = 3
        force: bool = False

    # -> <config-root>/museun/foobar/config.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from appstate.codecs import JSON, YAML, Codec
from appstate.dirs import ensure_config_dir, ensure_data_dir
from appstate.identity import identity_of
from appstate.store import Persistent


class Role(Persistent):
    """Common base of ``Settings`` and ``Data``; not used directly."""

    _codec: ClassVar[Codec]
    _role: ClassVar[str]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        roles = {base.__dict__["_role"] for base in cls.__mro__ if "_role" in base.__dict__}
        if len(roles) > 1:
            raise TypeError(f"{cls.__qualname__} must adopt exactly one of Settings or Data")


class Settings(Role):
    """Human-editable configuration stored under the per-user config root as YAML."""

    _role: ClassVar[str] = "settings"
    _codec: ClassVar[Codec] = YAML

    @classmethod
    def ensure_dir(cls) -> Path:
        identity = identity_of(cls)
        return ensure_config_dir(identity.organization, identity.application)


class Data(Role):
    """Application data stored under the per-user data root as JSON."""

    _role: ClassVar[str] = "data"
    _codec: ClassVar[Codec] = JSON

    @classmethod
    def ensure_dir(cls) -> Path:
        identity = identity_of(cls)
        return ensure_data_dir(identity.organization, identity.application)
