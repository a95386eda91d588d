"""Text codecs used by the role capabilities.

Both codecs work on plain documents (dicts, lists, scalars). Conversion
between documents and typed values happens in ``appstate.store``.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from appstate.exceptions import DeserializationError, SerializationError


class Codec:
    """Encode documents to text and back."""

    name = "codec"

    def encode(self, document: Any) -> str:
        raise NotImplementedError

    def decode(self, text: str) -> Any:
        raise NotImplementedError


class YamlCodec(Codec):
    """Human-editable YAML, block style, keys kept in declaration order."""

    name = "yaml"

    def encode(self, document: Any) -> str:
        try:
            return yaml.safe_dump(
                document,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        except yaml.YAMLError as e:
            raise SerializationError(f"YAML write error: {e}", codec=self.name) from e

    def decode(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise DeserializationError(
                f"YAML read error: {e}", codec=self.name, diagnostic=str(e)
            ) from e


class JsonCodec(Codec):
    """Machine-oriented JSON, 2-space indented; NaN and infinities are rejected."""

    name = "json"

    def encode(self, document: Any) -> str:
        try:
            return json.dumps(document, indent=2, allow_nan=False) + "\n"
        except (TypeError, ValueError) as e:
            raise SerializationError(f"JSON write error: {e}", codec=self.name) from e

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DeserializationError(
                f"JSON read error: {e}", codec=self.name, diagnostic=str(e)
            ) from e


YAML = YamlCodec()
JSON = JsonCodec()
