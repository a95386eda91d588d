"""Identity contract: who owns a persisted artifact and what it is called."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, NamedTuple, Protocol, runtime_checkable

from appstate.exceptions import InvalidIdentityError

_FORBIDDEN_COMPONENTS = {".", ".."}
_SEPARATORS = ("/", "\\")


@runtime_checkable
class Identity(Protocol):
    """Anything with the three identity constants and an ``ensure_dir``.

    ``ensure_dir`` returns the directory for the type's role, creating it
    when absent. Role mixins in ``appstate.roles`` provide it.
    """

    ORGANIZATION: ClassVar[str]
    APPLICATION: ClassVar[str]
    NAME: ClassVar[str]

    @classmethod
    def ensure_dir(cls) -> Path:
        ...


class IdentityTriple(NamedTuple):
    organization: str
    application: str
    name: str


def _check_component(owner: str, attr: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidIdentityError(
            f"{owner}.{attr} must be a string, got {type(value).__name__}", owner=owner
        )
    if not value.strip():
        raise InvalidIdentityError(f"{owner}.{attr} must not be empty", owner=owner)
    if value in _FORBIDDEN_COMPONENTS or any(sep in value for sep in _SEPARATORS):
        raise InvalidIdentityError(
            f"{owner}.{attr} must be a single path component, got {value!r}", owner=owner
        )
    return value


def identity_of(cls: type) -> IdentityTriple:
    """Read and validate the identity constants of ``cls``."""
    owner = getattr(cls, "__qualname__", repr(cls))
    parts = []
    for attr in ("ORGANIZATION", "APPLICATION", "NAME"):
        if not hasattr(cls, attr):
            raise InvalidIdentityError(f"{owner} does not define {attr}", owner=owner)
        parts.append(_check_component(owner, attr, getattr(cls, attr)))
    return IdentityTriple(*parts)
