"""Team listing endpoint"""
from fastapi import APIRouter

from judgeboard import state


router = APIRouter(prefix="/api", tags=["teams"])


@router.get("/teams")
async def list_teams():
    """Teams imported from the spreadsheet export"""
    return {
        "teams": [team.model_dump(by_alias=True) for team in state.TEAMS]
    }
