"""Loading configuration files and the host argument fallback."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from slantlib.config import freeConfig
from slantlib.configLoader import configFromHosts, loadConfig
from slantlib.errors import ConfigIoError, UnknownTokenError

CONFIG_TEXT = """
waittime 90 ;
servers https://a.example https://b.example { waittime 20 } ;
layout { header ; host { cpu hour } } ;
"""


def test_config_from_hosts() -> None:
    cfg = configFromHosts(["x", "y", "x"])
    assert [(h.url, h.waittime) for h in cfg.hosts] == [("x", 0), ("y", 0), ("x", 0)]
    assert cfg.waittime == 60
    assert cfg.layout is None


def test_config_from_no_hosts() -> None:
    cfg = configFromHosts([])
    assert cfg.hosts == []
    assert cfg.layout is None


def test_load_config_file(tmp_path: Path) -> None:
    cfgPath = tmp_path / "slantrc"
    cfgPath.write_text(CONFIG_TEXT, encoding="utf-8")

    cfg = loadConfig(cfgPath)
    assert cfg.waittime == 90
    assert [(h.url, h.waittime) for h in cfg.hosts] == [("https://a.example", 20), ("https://b.example", 20)]
    assert cfg.layout.header


def test_missing_file_uses_hosts(tmp_path: Path) -> None:
    cfg = loadConfig(tmp_path / "missing", ["h1", "h2"])
    assert [h.url for h in cfg.hosts] == ["h1", "h2"]
    assert cfg.waittime == 60
    assert cfg.layout is None


def test_missing_file_without_hosts_gives_defaults(tmp_path: Path) -> None:
    cfg = loadConfig(tmp_path / "missing")
    assert cfg.hosts == []
    assert cfg.layout is None


def test_hosts_replace_configured_servers(tmp_path: Path) -> None:
    """Explicit hosts win over servers; the file's layout and waittime still apply."""
    cfgPath = tmp_path / "slantrc"
    cfgPath.write_text(CONFIG_TEXT, encoding="utf-8")

    cfg = loadConfig(cfgPath, ["https://c.example"])
    assert [(h.url, h.waittime) for h in cfg.hosts] == [("https://c.example", 0)]
    assert cfg.waittime == 90
    assert cfg.layout is not None
    assert len(cfg.layout.boxes) == 1


def test_hosts_do_not_hide_parse_errors(tmp_path: Path) -> None:
    cfgPath = tmp_path / "slantrc"
    cfgPath.write_text("servers a ; bogus", encoding="utf-8")

    with pytest.raises(UnknownTokenError) as excInfo:
        loadConfig(cfgPath, ["h1"])
    assert excInfo.value.source == str(cfgPath)


def test_unreadable_source_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigIoError) as excInfo:
        loadConfig(tmp_path, ["h1"])
    assert excInfo.value.source == str(tmp_path)
    assert isinstance(excInfo.value.__cause__, OSError)


def test_home_directory_is_expanded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    (tmp_path / ".slantrc").write_text("servers home.example ;", encoding="utf-8")

    cfg = loadConfig()
    assert [h.url for h in cfg.hosts] == ["home.example"]


def test_repeated_load_and_free(tmp_path: Path) -> None:
    cfgPath = tmp_path / "slantrc"
    cfgPath.write_text(CONFIG_TEXT, encoding="utf-8")

    for _ in range(50):
        cfg = loadConfig(cfgPath)
        freeConfig(cfg)
        assert cfg.hosts == [] and cfg.layout is None


def test_io_error_is_logged(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="slantlib.configLoader"):
        with pytest.raises(ConfigIoError):
            loadConfig(tmp_path)

    assert [r.levelno for r in caplog.records] == [logging.WARNING]
    assert caplog.records[0].getMessage().startswith(f"{tmp_path}: read: ")
