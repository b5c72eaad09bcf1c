"""
Scoreboard service - score reads, saves and rankings on top of the active store
"""
import logging
import secrets
from datetime import datetime, timezone
from typing import Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from judgeboard import state
from judgeboard.core import records
from judgeboard.core.errors import AuthorizationError, StorageError, ValidationError
from judgeboard.core.ranking import rank
from judgeboard.core.store import ScoreStore
from judgeboard.models import ScoreEntry
from judgeboard.services.judge_registry import get_judge_by_session
from judgeboard.services.team_loader import get_team_name


logger = logging.getLogger(__name__)


def _store() -> ScoreStore:
    if state.STORE is None:
        raise StorageError("Score store is not initialized")
    return state.STORE


def is_admin(admin_key: Optional[str]) -> bool:
    """Admin access is disabled entirely when no key is configured"""
    expected = state.SETTINGS.admin_key
    if not expected or not admin_key:
        return False
    # bytes: compare_digest rejects non-ASCII str
    return secrets.compare_digest(admin_key.encode("utf-8"), expected.encode("utf-8"))


def read_scores(session_id: Optional[str] = None, admin_key: Optional[str] = None) -> Dict[str, Dict]:
    """
    Read the score store at the caller's access level

    Admins get every judge's entries; judges only their own.
    """
    if is_admin(admin_key):
        return records.store_to_json(_store().get_all())

    judge = get_judge_by_session(session_id)
    if judge is None:
        raise AuthorizationError("Unauthorized")
    return records.store_to_json(_store().get_all(judge_id=judge.email))


def save_scores(session_id: Optional[str], body: Dict) -> Dict[str, Dict]:
    """
    Upsert the caller's entry for one team

    Request body:
        {"teamId": "TEAM-1", "scores": {"problemRelevance": 12, ..., "notes": "..."}}
    "teamName" is accepted in place of "teamId".

    Returns:
        The caller's judge-scoped store after the save
    """
    judge = get_judge_by_session(session_id)
    if judge is None:
        raise AuthorizationError("Unauthorized")

    body = body if isinstance(body, dict) else {}
    for field in ("teamId", "teamName"):
        if body.get(field) is not None and not isinstance(body[field], str):
            raise ValidationError(f"{field} must be a string")
    team_id = (body.get("teamId") or "").strip() or (body.get("teamName") or "").strip()
    scores = body.get("scores")
    if not team_id or not scores:
        raise ValidationError("teamId and scores are required")
    if not isinstance(scores, dict):
        raise ValidationError("scores must be an object")

    try:
        entry = ScoreEntry.model_validate(scores)
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid scores: {e.errors()[0]['msg']}") from e

    team_name = body.get("teamName") or entry.team_name or get_team_name(team_id)
    entry = entry.model_copy(update={
        "team_name": team_name,
        "updated_at": datetime.now(timezone.utc).isoformat(),
    })

    record = _store().upsert(team_id, judge, entry)
    logger.info(
        f"📝 {judge.email} scored {team_id} | Total: {entry.total} | "
        f"Judges on team: {len(record.judges)}"
    )

    return records.store_to_json(_store().get_all(judge_id=judge.email))


def get_rankings(admin_key: Optional[str]) -> List[Dict]:
    """Ranked teams across all judges, with a 1-based rank index"""
    if not is_admin(admin_key):
        raise AuthorizationError("Invalid admin key")

    rankings = rank(_store().entries())

    for idx, row in enumerate(rankings):
        if row["teamLabel"] == row["teamId"]:
            row["teamLabel"] = get_team_name(row["teamId"]) or row["teamId"]
        row["rank"] = idx + 1

    return rankings
