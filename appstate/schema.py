"""Optional JSON Schema validation of loaded documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from jsonschema import Draft7Validator

from appstate.exceptions import SchemaValidationError
from appstate.logger import get_logger

logger = get_logger(__name__)


def schema_of(cls: type) -> Optional[Dict[str, Any]]:
    return getattr(cls, "SCHEMA", None)


def validate_document(
    document: Any,
    schema: Dict[str, Any],
    path: Optional[Path] = None,
    codec: Optional[str] = None,
) -> None:
    """Validate a decoded document against a JSON Schema.

    Args:
        document: Decoded file content
        schema: Draft 7 JSON Schema
        path: File the document came from (for error messages)
        codec: Codec name (for error messages)

    Raises:
        SchemaValidationError: If validation fails
    """
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path])

    if not errors:
        return

    messages = []
    for error in errors:
        location = ".".join(str(p) for p in error.absolute_path) or "<root>"
        messages.append(f"{location}: {error.message}")

    logger.error(f"Schema validation failed for {path}: {len(messages)} error(s)")
    for message in messages:
        logger.error(f"  - {message}")

    raise SchemaValidationError(
        f"{path or 'document'} failed schema validation with {len(messages)} error(s)",
        path=path,
        codec=codec,
        validation_errors=messages,
    )
