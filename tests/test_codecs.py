"""Tests for the YAML and JSON codecs."""

import pytest

from appstate.codecs import JSON, YAML
from appstate.exceptions import DeserializationError, SerializationError


def test_yaml_is_block_style_and_keeps_key_order():
    text = YAML.encode({"name": "Foobar", "attempts": 3, "force": False})

    assert text == "name: Foobar\nattempts: 3\nforce: false\n"


def test_yaml_keeps_unicode_readable():
    text = YAML.encode({"greeting": "héllo"})
    assert "héllo" in text


def test_yaml_decode_error_carries_parser_diagnostic():
    with pytest.raises(DeserializationError) as exc_info:
        YAML.decode("key: [1, 2\n")

    error = exc_info.value
    assert error.codec == "yaml"
    assert "line" in error.diagnostic


def test_yaml_refuses_arbitrary_python_objects():
    with pytest.raises(SerializationError):
        YAML.encode({"value": object()})

    with pytest.raises(DeserializationError):
        YAML.decode("!!python/object/apply:os.system ['true']")


def test_json_is_indented():
    text = JSON.encode({"a": "1", "b": [1, 2]})

    assert text.startswith("{\n  ")
    assert text.endswith("\n")


def test_json_decode_error_carries_position():
    with pytest.raises(DeserializationError) as exc_info:
        JSON.decode('{"a": ')

    assert exc_info.value.codec == "json"
    assert "char" in exc_info.value.diagnostic


def test_json_encode_error():
    with pytest.raises(SerializationError) as exc_info:
        JSON.encode({"values": {1, 2, 3}})

    assert exc_info.value.codec == "json"
