"""Tests for default path lookup and environment configuration."""

import pytest

from hostsfile.config import Config
from hostsfile.paths import default_hosts_path


class TestDefaultPath:

    def test_posix(self) -> None:
        assert default_hosts_path("posix") == "/etc/hosts"

    def test_windows_with_system_root(self) -> None:
        assert default_hosts_path("nt", "D:\\Win") == "D:\\Win\\System32\\drivers\\etc\\hosts"

    def test_windows_falls_back_to_env(self, monkeypatch) -> None:
        monkeypatch.setenv("SystemRoot", "E:\\OS")
        assert default_hosts_path("nt") == "E:\\OS\\System32\\drivers\\etc\\hosts"

    def test_windows_default_root(self, monkeypatch) -> None:
        monkeypatch.delenv("SystemRoot", raising=False)
        assert default_hosts_path("nt") == "C:\\Windows\\System32\\drivers\\etc\\hosts"


class TestConfig:

    def test_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("HOSTS_FILE", "/tmp/hosts")
        monkeypatch.setenv("HOSTS_ENCODING", "latin-1")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        config = Config.from_env()
        assert config == Config("/tmp/hosts", "latin-1", "DEBUG")
        config.validate()

    def test_defaults(self, monkeypatch) -> None:
        for name in ("HOSTS_FILE", "HOSTS_ENCODING", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = Config.from_env()
        assert config.hosts_file_path == default_hosts_path()
        assert config.encoding == "utf-8"
        assert config.log_level == "INFO"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="LOG_LEVEL"):
            Config(log_level="LOUD").validate()

    def test_invalid_encoding(self) -> None:
        with pytest.raises(ValueError, match="HOSTS_ENCODING"):
            Config(encoding="no-such-codec").validate()
