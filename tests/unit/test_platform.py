"""Unit tests for platform collaborators."""

import os
from pathlib import Path

import pytest

from pathnorm.config import PathnormConfig
from pathnorm.platform import FixedPlatform, HostPlatform, platform_from_config


class TestHostPlatform:
    """Test the process-backed platform."""

    def test_default_separator_is_os_sep(self):
        """Test the host separator is read at construction time."""
        assert HostPlatform().native_separator() == os.sep

    def test_separator_override(self):
        """Test a Windows separator can be configured on any host."""
        assert HostPlatform("\\").native_separator() == "\\"

    def test_invalid_separator(self):
        """Test unknown separators are rejected."""
        with pytest.raises(ValueError):
            HostPlatform(":")

    def test_current_directory_uses_forward_slashes(self, tmp_path, monkeypatch):
        """Test the process cwd is reported with '/' separators."""
        monkeypatch.chdir(tmp_path)
        cwd = HostPlatform().current_directory()
        assert "\\" not in cwd
        assert cwd == str(Path.cwd()).replace("\\", "/")


class TestFixedPlatform:
    """Test the pinned platform."""

    def test_values_are_pinned(self):
        """Test cwd and separator come back as given."""
        platform = FixedPlatform("/home/x", "\\")
        assert platform.current_directory() == "/home/x"
        assert platform.native_separator() == "\\"

    def test_cwd_translated(self):
        """Test a backslash cwd is stored with '/' separators."""
        assert FixedPlatform("C:\\Projects\\App").current_directory() == "C:/Projects/App"

    def test_empty_cwd_rejected(self):
        """Test an empty cwd is rejected."""
        with pytest.raises(ValueError):
            FixedPlatform("")


class TestPlatformFromConfig:
    """Test building a platform from configuration."""

    def test_default_config_uses_host(self):
        """Test no pinned cwd gives the host platform."""
        platform = platform_from_config(PathnormConfig())
        assert isinstance(platform, HostPlatform)
        assert platform.native_separator() == os.sep

    def test_pinned_cwd(self):
        """Test a configured cwd gives a fixed platform."""
        config = PathnormConfig(platform={"cwd": "/srv/build", "separator": "\\"})
        platform = platform_from_config(config)
        assert isinstance(platform, FixedPlatform)
        assert platform.current_directory() == "/srv/build"
        assert platform.native_separator() == "\\"

    def test_separator_only(self):
        """Test a configured separator keeps the host cwd."""
        platform = platform_from_config(PathnormConfig(platform={"separator": "\\"}))
        assert isinstance(platform, HostPlatform)
        assert platform.native_separator() == "\\"
