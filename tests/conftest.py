"""Shared test fixtures."""
import pytest

from judgeboard import state
from judgeboard.core.store import JsonFileScoreStore, SqliteScoreStore
from judgeboard.models import JudgeIdentity, ScoreEntry, Settings, TeamRecord


ADMIN_KEY = "test-admin-key"


def make_entry(value: int, notes: str = "") -> ScoreEntry:
    """ScoreEntry with every category set to value"""
    return ScoreEntry(
        problem_relevance=value,
        technical_feasibility=value,
        statement_alignment=value,
        creativity=value,
        presentation=value,
        google_tech_use=value,
        notes=notes,
    )


def make_scores(value: int) -> dict:
    """JSON scores payload with every category set to value"""
    return {
        "problemRelevance": value,
        "technicalFeasibility": value,
        "statementAlignment": value,
        "creativity": value,
        "presentation": value,
        "googleTechUse": value,
    }


J1 = JudgeIdentity(email="j1@example.com", name="Judge One")
J2 = JudgeIdentity(email="j2@example.com", name="Judge Two")


@pytest.fixture(params=["file", "sqlite"])
def store(request, tmp_path):
    """Each store test runs against both backends"""
    if request.param == "file":
        return JsonFileScoreStore(str(tmp_path / "scores.json"))
    return SqliteScoreStore(str(tmp_path / "judging.sqlite"))


@pytest.fixture
def app_state(tmp_path):
    """Install a fresh file store and settings into global state"""
    state.SETTINGS = Settings(admin_key=ADMIN_KEY)
    state.STORE = JsonFileScoreStore(str(tmp_path / "scores.json"))
    state.TEAMS = [
        TeamRecord(id="TEAM-1", team_name="Aurora"),
        TeamRecord(id="TEAM-2", team_name="Nebula"),
    ]
    state.JUDGE_SESSIONS.clear()
    yield state
    state.STORE = None
    state.TEAMS = []
    state.JUDGE_SESSIONS.clear()
    state.SETTINGS = Settings()
