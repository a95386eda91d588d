"""Tests for the package surface."""

import importlib

from loguru import logger

import appstate
from appstate.env import env as env_function
from appstate.store import path as path_function
from sample_types import MyConfiguration


def test_package_imports_and_exports_public_names():
    module = importlib.import_module("appstate")

    for name in module.__all__:
        assert hasattr(module, name), name


def test_exports_are_functions_not_submodules():
    assert appstate.env is env_function
    assert appstate.path is path_function
    assert callable(appstate.configure_logging)


def test_library_is_silent_until_configured():
    messages = []
    sink_id = logger.add(messages.append, level="TRACE", format="{message}")
    try:
        MyConfiguration.load_or_default()
    finally:
        logger.remove(sink_id)

    assert messages == []
