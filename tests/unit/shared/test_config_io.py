"""Tests for config I/O utilities."""

from pathlib import Path
from unittest.mock import patch

import pytest

from vcslink.domain.config import HostsConfig, OutputConfig, VcslinkConfig
from vcslink.shared.config_io import (
    create_default_config_file,
    get_global_config_path,
    load_config,
    load_config_data,
    save_config,
)


class TestGetGlobalConfigPath:
    """Tests for get_global_config_path function."""

    def test_uses_xdg_config_home(self, tmp_path, monkeypatch):
        """Test that XDG_CONFIG_HOME is honored on Linux and macOS."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        with patch("vcslink.shared.config_io.platform.system", return_value="Linux"):
            assert get_global_config_path() == tmp_path / "vcslink" / "config.toml"

    def test_falls_back_to_home(self, tmp_path, monkeypatch):
        """Test the ~/.config default when XDG_CONFIG_HOME is unset."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        with patch("vcslink.shared.config_io.platform.system", return_value="Darwin"), patch(
            "vcslink.shared.config_io.Path.home", return_value=tmp_path
        ):
            assert get_global_config_path() == tmp_path / ".config" / "vcslink" / "config.toml"

    def test_uses_appdata_on_windows(self, tmp_path, monkeypatch):
        """Test that APPDATA is used on Windows."""
        monkeypatch.setenv("APPDATA", str(tmp_path))
        with patch("vcslink.shared.config_io.platform.system", return_value="Windows"):
            assert get_global_config_path() == tmp_path / "vcslink" / "config.toml"


class TestLoadConfigData:
    """Tests for load_config_data and load_config functions."""

    def test_missing_file_raises(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_data(tmp_path / "config.toml")

    def test_invalid_toml_raises_value_error(self, tmp_path):
        """Test that malformed TOML is reported as ValueError."""
        path = tmp_path / "config.toml"
        path.write_text("[output\n")

        with pytest.raises(ValueError, match="Invalid TOML"):
            load_config_data(path)

    def test_load_config_merges_over_defaults(self, tmp_path):
        """Test that missing sections keep their defaults."""
        path = tmp_path / "config.toml"
        path.write_text('[output]\nformat = "json"\n')

        config = load_config(path)

        assert config.output.format == "json"
        assert config.hosts == HostsConfig()


class TestWriteConfig:
    """Tests for save_config and create_default_config_file functions."""

    def test_save_and_load(self, tmp_path):
        """Test that a saved config loads back unchanged."""
        config = VcslinkConfig(
            hosts=HostsConfig(github=["github.example.com"], sourcehut=["sr.example.org"]),
            output=OutputConfig(format="json"),
        )
        path = tmp_path / "nested" / "config.toml"

        save_config(config, path)

        assert load_config(path) == config

    def test_default_file_is_valid_and_commented(self, tmp_path: Path):
        """Test that the generated template parses to the defaults."""
        path = tmp_path / "vcslink" / "config.toml"

        create_default_config_file(path)

        assert path.read_text().startswith("# vcslink configuration")
        assert load_config(path) == VcslinkConfig.default()
