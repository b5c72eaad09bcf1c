"""
Health check and system status endpoints
"""
from fastapi import APIRouter
from judgeboard import state


router = APIRouter(tags=["health"])


@router.get("/")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Judgeboard - Hackathon Judging Server",
        "version": "1.0.0",
        "storage_backend": state.SETTINGS.storage.backend,
        "total_teams": len(state.TEAMS),
        "signed_in_judges": len(state.JUDGE_SESSIONS)
    }
