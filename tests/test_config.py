"""Tests for YAML configuration."""

from pathlib import Path

import pytest

from release_note_labeler.config import Config


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the home directory at a temporary one."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    return home_dir


def test_set_and_get(tmp_path: Path, home: Path) -> None:
    """Test values persist to the YAML file."""
    config = Config(config_dir=tmp_path / "local")
    config.set("github.token", "abc")

    assert config.get("github.token") == "abc"
    assert Config(config_dir=tmp_path / "local").get("github.token") == "abc"
    assert "github.token: abc" in (tmp_path / "local" / "config.yaml").read_text()


def test_unset(tmp_path: Path, home: Path) -> None:
    """Test removing a value."""
    config = Config(config_dir=tmp_path / "local")
    config.set("github.base_url", "https://ghe.example.com/api/v3")
    config.unset("github.base_url")

    assert config.get("github.base_url") is None
    assert config.get("github.base_url", "default") == "default"


def test_global_fallback(tmp_path: Path, home: Path) -> None:
    """Test local config falls back to global values, local winning."""
    global_config = Config(use_global=True)
    global_config.set("github.token", "global-token")
    global_config.set("github.base_url", "https://global.example.com")

    local = Config(config_dir=tmp_path / "local")
    local.set("github.base_url", "https://local.example.com")

    local = Config(config_dir=tmp_path / "local")
    assert local.get("github.token") == "global-token"
    assert local.get("github.base_url") == "https://local.example.com"
    assert local.list() == {"github.token": "global-token", "github.base_url": "https://local.example.com"}


def test_environment_fallback(tmp_path: Path, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the token falls back to GITHUB_TOKEN."""
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    config = Config(config_dir=tmp_path / "local")

    assert config.get("github.token") == "env-token"
    config.set("github.token", "file-token")
    assert config.get("github.token") == "file-token"


def test_invalid_yaml(tmp_path: Path, home: Path) -> None:
    """Test unreadable config files raise ValueError."""
    config_dir = tmp_path / "local"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("key: [unclosed\n")

    with pytest.raises(ValueError, match="Failed to load config"):
        Config(config_dir=config_dir)


@pytest.mark.parametrize(
    ("key", "value", "message"),
    [
        ("github.tokn", "abc", "Unknown config key 'github.tokn'"),
        ("backend", "github", "Unknown config key 'backend'"),
        ("github.token", "", "Empty value for 'github.token'"),
        ("github.base_url", "ghe.example.com/api/v3", "must be an http\\(s\\) URL"),
    ],
)
def test_set_rejects_bad_settings(tmp_path: Path, home: Path, key: str, value: str, message: str) -> None:
    """Test misspelled keys and unusable values are refused and not saved."""
    config = Config(config_dir=tmp_path / "local")

    with pytest.raises(ValueError, match=message):
        config.set(key, value)
    assert not (tmp_path / "local" / "config.yaml").exists()


def test_source(tmp_path: Path, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test each value reports where it was read from."""
    Config(use_global=True).set("github.base_url", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    config = Config(config_dir=tmp_path / "local")

    assert config.source("github.token") == "environment GITHUB_TOKEN"
    assert config.source("github.base_url") == "global"

    config.set("github.token", "file-token")
    assert config.source("github.token") == "local"


def test_source_unset(tmp_path: Path, home: Path) -> None:
    """Test a key set nowhere has no source."""
    assert Config(config_dir=tmp_path / "local").source("github.base_url") is None
