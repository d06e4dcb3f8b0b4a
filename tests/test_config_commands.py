"""Tests for the config subcommands."""

from pathlib import Path

import pytest

from release_note_labeler import config_commands


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with an empty home and no GitHub variables."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GITHUB_API_URL", raising=False)
    return work_dir


def test_set_masks_token(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the token is never echoed in full."""
    config_commands.set("github.token", "ghp_abcdefghij1234")

    out = capsys.readouterr().out
    assert out.strip() == "Set github.token = ****1234 (local)"
    assert "github.token: ghp_abcdefghij1234" in (workspace / ".release-note-labeler" / "config.yaml").read_text()


def test_short_token_fully_masked(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test short tokens show no characters at all."""
    config_commands.set("github.token", "abc", global_=True)
    assert capsys.readouterr().out.strip() == "Set github.token = **** (global)"


def test_set_unknown_key(workspace: Path) -> None:
    """Test a misspelled key is refused."""
    with pytest.raises(ValueError, match="expected one of: github.token, github.base_url"):
        config_commands.set("github.url", "https://ghe.example.com/api/v3")


def test_get_shows_source(
    workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test get reports where the value was found."""
    monkeypatch.setenv("GITHUB_API_URL", "https://ghe.example.com/api/v3")

    config_commands.get("github.base_url")
    config_commands.get("github.token")

    assert capsys.readouterr().out.splitlines() == [
        "github.base_url = https://ghe.example.com/api/v3 (environment GITHUB_API_URL)",
        "github.token is not set",
    ]


def test_get_unknown_key(workspace: Path) -> None:
    """Test reading a key the tool never uses is an error."""
    with pytest.raises(ValueError, match="Unknown config key 'token'"):
        config_commands.get("token")


def test_unset_reports_remaining_source(
    workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test unset says when a value still applies from elsewhere."""
    config_commands.set("github.token", "file-token-5678")
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")
    capsys.readouterr()

    config_commands.unset("github.token")

    assert capsys.readouterr().out.splitlines() == [
        "Unset github.token (local)",
        "github.token is still set from environment GITHUB_TOKEN",
    ]


def test_list_shows_every_known_key(workspace: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Test list includes unset keys and flags keys the tool ignores."""
    config_dir = workspace / ".release-note-labeler"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text("github.base_url: https://ghe.example.com/api/v3\nbackend: github\n")

    config_commands.list_config()

    out = capsys.readouterr().out
    assert "github.token is not set" in out
    assert "github.base_url = https://ghe.example.com/api/v3 (local)" in out
    assert "Ignored keys (remove with 'rnl config unset'):\n  backend" in out
