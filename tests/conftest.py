"""Pytest configuration for embedplayer tests."""

import pytest

from embedplayer.config.loader import ENV_VARS, clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Resolve configuration from defaults only, unless a test opts in.

    Clears EMBEDPLAYER_* variables, points the root directory at an empty
    temp dir and runs from a directory without a project config.
    """
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("EMBEDPLAYER_ROOT", str(tmp_path / "root"))

    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)

    clear_config_cache()
    yield
    clear_config_cache()
