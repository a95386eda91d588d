"""Shared fixtures: keep every test away from the real home directory."""

import pytest

from appstate.settings import CONFIG_HOME_VAR, DATA_HOME_VAR


@pytest.fixture(autouse=True)
def isolated_roots(tmp_path, monkeypatch):
    config_home = tmp_path / "config"
    data_home = tmp_path / "data"
    monkeypatch.setenv(CONFIG_HOME_VAR, str(config_home))
    monkeypatch.setenv(DATA_HOME_VAR, str(data_home))
    return config_home, data_home
