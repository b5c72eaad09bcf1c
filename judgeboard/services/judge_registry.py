"""Judge sign-in and session lookup"""
import logging
import uuid
from typing import Dict, Optional

from judgeboard import state
from judgeboard.core.errors import AuthorizationError, ValidationError
from judgeboard.models import JudgeIdentity


logger = logging.getLogger(__name__)


def sign_in(email: str, name: Optional[str] = None) -> Dict[str, str]:
    clean_email = (email or "").strip().lower()
    if not clean_email:
        raise ValidationError("email required")

    allowed = {judge.strip().lower() for judge in state.SETTINGS.judges}
    if allowed and clean_email not in allowed:
        raise AuthorizationError(f"{clean_email} is not a registered judge")

    judge = JudgeIdentity(email=clean_email, name=(name or "").strip() or None)
    session_id = uuid.uuid4().hex
    state.JUDGE_SESSIONS[session_id] = judge
    logger.info(f"🔑 Judge signed in: {judge.display_name} <{judge.email}>")

    return {
        "judgeEmail": judge.email,
        "judgeName": judge.display_name,
        "judgeSessionId": session_id,
    }


def sign_out(session_id: str) -> bool:
    return state.JUDGE_SESSIONS.pop(session_id, None) is not None


def get_judge_by_session(session_id: Optional[str]) -> Optional[JudgeIdentity]:
    if not session_id:
        return None
    return state.JUDGE_SESSIONS.get(session_id)
