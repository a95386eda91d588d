"""Generic load/save operations for any type with an identity and a role.

The functions here only rely on three things from the target class: the
identity constants, an ``ensure_dir()`` classmethod and a ``_codec``
attribute. ``appstate.roles.Settings`` and ``appstate.roles.Data`` supply the
last two.
"""

from __future__ import annotations

import dataclasses
import os
import types
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import (
    Any,
    Dict,
    Generic,
    Mapping,
    Optional,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from appstate.codecs import Codec
from appstate.exceptions import (
    ArtifactNotFoundError,
    DeserializationError,
    SerializationError,
    StateIOError,
)
from appstate.identity import identity_of
from appstate.logger import get_logger
from appstate.schema import schema_of, validate_document

logger = get_logger(__name__)

T = TypeVar("T")

_UnionType = getattr(types, "UnionType", None)  # "X | Y" annotations


class LoadState(Enum):
    LOADED = "loaded"
    DEFAULT = "default"


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of ``load_or_default``.

    ``DEFAULT`` means no file existed; the default value has already been
    written to ``path``.
    """

    state: LoadState
    value: T
    path: Path

    @classmethod
    def loaded(cls, value: T, path: Path) -> "LoadResult[T]":
        return cls(LoadState.LOADED, value, path)

    @classmethod
    def default(cls, value: T, path: Path) -> "LoadResult[T]":
        return cls(LoadState.DEFAULT, value, path)

    @property
    def is_loaded(self) -> bool:
        return self.state is LoadState.LOADED

    @property
    def is_default(self) -> bool:
        return self.state is LoadState.DEFAULT


def codec_of(cls: type) -> Codec:
    codec = getattr(cls, "_codec", None)
    if not isinstance(codec, Codec):
        raise TypeError(f"{cls.__qualname__} has no role; inherit from Settings or Data")
    return codec


def to_document(value: Any) -> Dict[str, Any]:
    """Convert a value into a plain mapping for encoding."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        document = to_dict()
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        document = dataclasses.asdict(value)
    elif isinstance(value, Mapping):
        document = dict(value)
    else:
        raise SerializationError(
            f"Cannot convert {type(value).__name__} to a document; "
            "use a dataclass or define to_dict()"
        )

    if not isinstance(document, Mapping):
        raise SerializationError(
            f"{type(value).__name__}.to_dict() returned {type(document).__name__}, expected a mapping"
        )
    return _plain(dict(document))


def _plain(value: Any) -> Any:
    """Tuples and sets become lists so both codecs write the same shape."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_plain(item) for item in sorted(value, key=repr)]
    return value


def _field_types(cls: type) -> Dict[str, Any]:
    try:
        hints = get_type_hints(cls)
    except (NameError, TypeError) as e:
        raise DeserializationError(
            f"Cannot resolve field types of {cls.__qualname__}: {e}", diagnostic=str(e)
        ) from e
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(cls) if f.init}


def _expect(kind: Any, value: Any, where: str) -> None:
    if not isinstance(value, kind):
        expected = kind[0].__name__ if isinstance(kind, tuple) else kind.__name__
        raise DeserializationError(
            f"{where}: expected {expected}, got {type(value).__name__}",
            diagnostic=f"{where} is {type(value).__name__}",
        )


def _convert_key(tp: Any, key: Any, where: str) -> Any:
    # JSON object keys are always strings
    if tp in (int, float) and isinstance(key, str):
        return tp(key)
    return _convert(tp, key, where)


def _convert(tp: Any, value: Any, where: str) -> Any:
    """Rebuild ``value`` as the annotated type ``tp``."""
    if tp is Any or isinstance(tp, TypeVar):
        return value

    origin = get_origin(tp)
    args = get_args(tp)

    if origin is Union or (_UnionType is not None and origin is _UnionType):
        if value is None and type(None) in args:
            return None
        members = [arg for arg in args if arg is not type(None)]
        if len(members) == 1:
            return _convert(members[0], value, where)
        # Several candidate types: only scalars are unambiguous
        if any(dataclasses.is_dataclass(arg) or get_origin(arg) is not None for arg in members):
            raise DeserializationError(
                f"{where}: cannot rebuild a value of type {tp}", diagnostic=f"unsupported type {tp}"
            )
        return value

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return from_document(tp, value, where)

    if origin is tuple or tp is tuple:
        _expect((list, tuple), value, where)
        if not args:
            return tuple(value)
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_convert(args[0], item, f"{where}[{i}]") for i, item in enumerate(value))
        if len(args) != len(value):
            raise DeserializationError(
                f"{where}: expected {len(args)} item(s), got {len(value)}",
                diagnostic=f"{where} has {len(value)} item(s)",
            )
        return tuple(_convert(arg, item, f"{where}[{i}]") for i, (arg, item) in enumerate(zip(args, value)))

    if origin in (list, set, frozenset) or tp in (list, set, frozenset):
        _expect(list, value, where)
        item_type = args[0] if args else Any
        items = [_convert(item_type, item, f"{where}[{i}]") for i, item in enumerate(value)]
        container = origin or tp
        return items if container is list else container(items)

    if origin is dict or tp is dict:
        _expect(dict, value, where)
        key_type, item_type = args if args else (Any, Any)
        return {
            _convert_key(key_type, key, where): _convert(item_type, item, f"{where}.{key}")
            for key, item in value.items()
        }

    return value


def from_document(cls: Type[T], document: Any, where: Optional[str] = None) -> T:
    """Build an instance of ``cls`` from a decoded mapping.

    Dataclass fields are rebuilt from their annotations: nested dataclasses,
    tuples, lists, sets and dicts of them come back as the declared types.
    """
    where = where or cls.__qualname__
    if not isinstance(document, Mapping):
        raise DeserializationError(
            f"{where}: expected a mapping, got {type(document).__name__}",
            diagnostic=f"{where} is {type(document).__name__}",
        )

    from_dict = getattr(cls, "from_dict", None)
    try:
        if callable(from_dict):
            return from_dict(dict(document))
        if dataclasses.is_dataclass(cls):
            field_types = _field_types(cls)
            kwargs = {
                key: _convert(field_types[key], item, f"{where}.{key}") if key in field_types else item
                for key, item in document.items()
            }
            return cls(**kwargs)
    except (TypeError, ValueError, KeyError) as e:
        raise DeserializationError(
            f"Cannot build {cls.__qualname__} from document: {e}", diagnostic=str(e)
        ) from e

    raise DeserializationError(
        f"Cannot build {cls.__qualname__}; use a dataclass or define from_dict()"
    )


def directory(cls: type) -> Path:
    """Ensure the role directory of ``cls`` exists and return it."""
    identity_of(cls)
    return cls.ensure_dir()


def path(cls: type) -> Path:
    """Ensure the role directory exists and return the artifact path inside it."""
    identity = identity_of(cls)
    return cls.ensure_dir() / identity.name


def load(cls: Type[T]) -> T:
    """Load ``cls`` from its artifact.

    Raises:
        ArtifactNotFoundError: If no artifact exists
        StateIOError: If the artifact cannot be read
        DeserializationError: If the content is malformed
    """
    codec_of(cls)
    return _read(cls, path(cls))


def _read(cls: Type[T], target: Path) -> T:
    codec = codec_of(cls)

    try:
        with open(target, "r", encoding="utf-8") as fh:
            text = fh.read()
    except FileNotFoundError as e:
        raise ArtifactNotFoundError(
            f"No persisted state at {target}",
            path=target,
            operation="read",
            errno=e.errno,
        ) from e
    except OSError as e:
        raise StateIOError(
            f"Cannot read {target}: {e}", path=target, operation="read", errno=e.errno
        ) from e
    except UnicodeDecodeError as e:
        raise DeserializationError(
            f"{target} is not valid UTF-8: {e}", path=target, codec=codec.name, diagnostic=str(e)
        ) from e

    try:
        document = codec.decode(text)
        schema = schema_of(cls)
        if schema is not None:
            validate_document(document, schema, path=target, codec=codec.name)
        value = from_document(cls, document)
    except DeserializationError as e:
        if e.path is None:
            e.path = target
        if e.codec is None:
            e.codec = codec.name
        logger.error(f"Failed to load {cls.__qualname__} from {target}: {e}")
        raise

    logger.debug(f"Loaded {cls.__qualname__} from {target}")
    return value


def save(value: Any) -> Path:
    """Write ``value`` to its artifact, replacing any previous content.

    Returns:
        Path that was written
    """
    cls = type(value)
    codec_of(cls)
    return _write(value, path(cls))


def _write(value: Any, target: Path) -> Path:
    cls = type(value)
    codec = codec_of(cls)
    text = codec.encode(to_document(value))

    tmp = target.with_name(target.name + ".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as fh:
            fh.write(text)
        os.replace(tmp, target)
    except OSError as e:
        try:
            tmp.unlink()
        except OSError:
            pass  # Nothing left behind, or already gone
        raise StateIOError(
            f"Cannot write {target}: {e}", path=target, operation="write", errno=e.errno
        ) from e

    logger.debug(f"Saved {cls.__qualname__} to {target}")
    return target


def load_or_default(cls: Type[T]) -> LoadResult[T]:
    """Load ``cls``, or create, persist and return its default.

    Only a missing artifact triggers the default. Unreadable or malformed
    artifacts raise so that existing data is never overwritten.
    """
    target = path(cls)
    try:
        value = _read(cls, target)
    except ArtifactNotFoundError:
        default_value = cls()
        _write(default_value, target)
        logger.info(f"No persisted {cls.__qualname__}, created default at {target}")
        return LoadResult.default(default_value, target)

    return LoadResult.loaded(value, target)


class Persistent:
    """Mixin exposing the module functions as methods of the adopting type."""

    @classmethod
    def path(cls) -> Path:
        return path(cls)

    @classmethod
    def directory(cls) -> Path:
        return directory(cls)

    @classmethod
    def load(cls: Type[T]) -> T:
        return load(cls)

    @classmethod
    def load_or_default(cls: Type[T]) -> LoadResult[T]:
        return load_or_default(cls)

    def save(self) -> Path:
        return save(self)
