"""Tests for JSON Schema validation on load."""

import json

import pytest

from appstate import DeserializationError, SchemaValidationError
from appstate.schema import validate_document
from sample_types import Scoreboard


def test_valid_document_loads():
    Scoreboard(player="ada", scores=[3, 5]).save()

    assert Scoreboard.load() == Scoreboard(player="ada", scores=[3, 5])


def test_schema_violation_raises_with_messages():
    Scoreboard.path().write_text(json.dumps({"player": "", "scores": [1, -2]}), encoding="utf-8")

    with pytest.raises(SchemaValidationError) as exc_info:
        Scoreboard.load()

    error = exc_info.value
    assert isinstance(error, DeserializationError)
    assert error.path == Scoreboard.path()
    assert error.codec == "json"
    assert len(error.validation_errors) == 2
    assert any(message.startswith("scores.1:") for message in error.validation_errors)


def test_schema_violation_is_not_replaced_by_default():
    artifact = Scoreboard.path()
    artifact.write_text(json.dumps({"scores": []}), encoding="utf-8")

    with pytest.raises(SchemaValidationError):
        Scoreboard.load_or_default()

    assert json.loads(artifact.read_text(encoding="utf-8")) == {"scores": []}


def test_validate_document_root_error_location():
    with pytest.raises(SchemaValidationError) as exc_info:
        validate_document([], {"type": "object"})

    assert exc_info.value.validation_errors[0].startswith("<root>:")
