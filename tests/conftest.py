"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the global config location at an empty temporary directory.

    Keeps a developer's own ~/.config/vcslink/config.toml out of test runs.

    Returns:
        Path where the global config would live (not created).
    """
    config_home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    return config_home / "vcslink" / "config.toml"
