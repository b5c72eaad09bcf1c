"""
Admin endpoints (gated by the shared admin key)
"""
from fastapi import APIRouter, Header, HTTPException
from typing import Optional
import logging

from judgeboard.core.errors import AuthorizationError, StorageError
from judgeboard.services.scoreboard import get_rankings


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/rankings")
def rankings(key: Optional[str] = None, x_admin_key: Optional[str] = Header(None)):
    """
    Team rankings: total points across all judges, highest first

    Response:
        {
            "teams": [{"rank": 1, "teamId": "TEAM-1", "teamLabel": "Aurora",
                       "total": 150, "judgeCount": 2}, ...],
            "total_teams": 1
        }
    """
    try:
        teams = get_rankings(key or x_admin_key)
    except AuthorizationError as e:
        raise HTTPException(status_code=401, detail=str(e))
    except StorageError as e:
        logger.error(f"❌ Failed to compute rankings: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "teams": teams,
        "total_teams": len(teams)
    }
