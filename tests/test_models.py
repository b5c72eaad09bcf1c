"""
Tests for score entry validation and clamping
"""
import pytest
from pydantic import ValidationError

from judgeboard.models import MAX_SCORE, ScoreEntry, TeamScoreRecord, clamp_score


def test_clamp_in_range():
    assert clamp_score(7) == 7


def test_clamp_above_max():
    assert clamp_score(99) == MAX_SCORE


def test_clamp_below_min():
    assert clamp_score(-4) == 0


def test_clamp_numeric_string():
    """Form inputs arrive as strings"""
    assert clamp_score("12") == 12


def test_clamp_huge_int():
    """Integers too large for a float still clamp"""
    assert clamp_score(10 ** 400) == MAX_SCORE
    assert clamp_score(-(10 ** 400)) == 0


def test_clamp_infinity():
    assert clamp_score(float("inf")) == MAX_SCORE
    assert clamp_score(float("-inf")) == 0
    assert clamp_score("1e400") == MAX_SCORE


def test_clamp_fraction_truncates():
    assert clamp_score(12.7) == 12
    assert clamp_score("3.2") == 3


def test_clamp_rejects_nan():
    with pytest.raises(ValueError):
        clamp_score(float("nan"))
    with pytest.raises(ValueError):
        clamp_score("nan")


def test_clamp_empty_is_zero():
    assert clamp_score(None) == 0
    assert clamp_score("") == 0


def test_clamp_rejects_text():
    with pytest.raises(ValueError):
        clamp_score("excellent")


def test_entry_clamps_every_category():
    """Out-of-range sub-scores are clamped on construction"""
    entry = ScoreEntry.model_validate({
        "problemRelevance": 20,
        "technicalFeasibility": -1,
        "statementAlignment": 15,
        "creativity": 0,
        "presentation": 16,
        "googleTechUse": 100,
    })
    assert entry.problem_relevance == 15
    assert entry.technical_feasibility == 0
    assert entry.presentation == 15
    assert entry.google_tech_use == 15
    assert entry.total == 60


def test_entry_total_range():
    entry = ScoreEntry.model_validate({name: 15 for name in (
        "problemRelevance", "technicalFeasibility", "statementAlignment",
        "creativity", "presentation", "googleTechUse",
    )})
    assert entry.total == 90


def test_entry_rejects_non_numeric_score():
    with pytest.raises(ValidationError):
        ScoreEntry.model_validate({"creativity": "lots"})


def test_entry_null_notes_become_empty():
    assert ScoreEntry.model_validate({"notes": None}).notes == ""


def test_record_dump_uses_json_names():
    record = TeamScoreRecord(creativity=3, updated_by="j1@example.com", judges=[ScoreEntry(creativity=3)])
    data = record.model_dump(by_alias=True, exclude_none=True)
    assert data["creativity"] == 3
    assert data["updatedBy"] == "j1@example.com"
    assert "updatedByName" not in data
    assert data["judges"][0]["googleTechUse"] == 0
