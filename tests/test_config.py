"""
Tests for configuration loading and judge sessions
"""
import pytest

from judgeboard.config import load_config
from judgeboard.core.errors import AuthorizationError, ValidationError
from judgeboard.services.judge_registry import get_judge_by_session, sign_in, sign_out


def test_load_config(tmp_path, monkeypatch):
    monkeypatch.delenv("JUDGEBOARD_ADMIN_KEY", raising=False)
    path = tmp_path / "judging.yaml"
    path.write_text(
        "storage:\n"
        "  backend: sqlite\n"
        "  sqlite_path: /tmp/j.sqlite\n"
        "admin_key: secret\n"
        "judges:\n"
        "  - a@example.com\n",
        encoding="utf-8",
    )
    settings = load_config(str(path))
    assert settings.storage.backend == "sqlite"
    assert settings.storage.sqlite_path == "/tmp/j.sqlite"
    assert settings.storage.scores_path == "data/scores.json"
    assert settings.admin_key == "secret"
    assert settings.judges == ["a@example.com"]


def test_load_config_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "judging.yaml"
    path.write_text("admin_key: from-file\n", encoding="utf-8")
    monkeypatch.setenv("JUDGEBOARD_CONFIG", str(path))
    monkeypatch.setenv("JUDGEBOARD_ADMIN_KEY", "from-env")
    settings = load_config()
    assert settings.admin_key == "from-env"
    assert settings.storage.backend == "file"


def test_load_config_empty_file(tmp_path, monkeypatch):
    monkeypatch.delenv("JUDGEBOARD_ADMIN_KEY", raising=False)
    path = tmp_path / "judging.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)).admin_key is None


def test_load_config_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_sign_in_session(app_state):
    info = sign_in("  J1@Example.com ", "Judge One")
    assert info["judgeEmail"] == "j1@example.com"
    judge = get_judge_by_session(info["judgeSessionId"])
    assert judge.email == "j1@example.com"
    assert judge.display_name == "Judge One"

    assert sign_out(info["judgeSessionId"]) is True
    assert get_judge_by_session(info["judgeSessionId"]) is None
    assert sign_out(info["judgeSessionId"]) is False


def test_sign_in_name_defaults_to_email(app_state):
    info = sign_in("j2@example.com")
    assert info["judgeName"] == "j2@example.com"


def test_sign_in_validation(app_state):
    with pytest.raises(ValidationError):
        sign_in("   ")
    app_state.SETTINGS.judges = ["j1@example.com"]
    with pytest.raises(AuthorizationError):
        sign_in("intruder@example.com")


def test_get_judge_without_session(app_state):
    assert get_judge_by_session(None) is None
    assert get_judge_by_session("unknown") is None
