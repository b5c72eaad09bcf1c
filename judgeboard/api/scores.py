"""
Score read/write endpoints
"""
from fastapi import APIRouter, Header, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from typing import Optional
import logging

from judgeboard.core.errors import AuthorizationError, StorageError, ValidationError
from judgeboard.services.scoreboard import read_scores, save_scores


router = APIRouter(prefix="/api", tags=["scores"])
logger = logging.getLogger(__name__)


@router.get("/scores")
def get_scores(
    key: Optional[str] = None,
    x_judge_session: Optional[str] = Header(None),
    x_admin_key: Optional[str] = Header(None),
):
    """
    Get scores visible to the caller

    Judges (X-Judge-Session header) see only their own entries.
    Admins (?key= or X-Admin-Key header) see every judge's entries.
    """
    try:
        return read_scores(session_id=x_judge_session, admin_key=key or x_admin_key)
    except AuthorizationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except StorageError as e:
        logger.error(f"❌ Failed to read scores: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/scores")
async def post_scores(request: Request, x_judge_session: Optional[str] = Header(None)):
    """
    Save the caller's scores for one team

    Request:
        {
            "teamId": "TEAM-1",          # or "teamName"
            "scores": {
                "problemRelevance": 12,
                "technicalFeasibility": 10,
                "statementAlignment": 11,
                "creativity": 14,
                "presentation": 9,
                "googleTechUse": 13,
                "notes": "Strong demo"
            }
        }

    Response:
        Judge-scoped mapping team id -> record, same shape as GET /api/scores
    """
    if not x_judge_session:
        raise HTTPException(status_code=401, detail="Unauthorized")

    try:
        body = await request.json()
    except ValueError:
        body = None  # rejected by save_scores after the session check

    try:
        # File and sqlite I/O stay off the event loop
        return await run_in_threadpool(save_scores, x_judge_session, body)
    except AuthorizationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        logger.error(f"❌ Failed to save scores | Body: {body} | Error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
