"""Judge sign-in endpoints"""
from fastapi import APIRouter, Header, HTTPException
from typing import Optional

from judgeboard.core.errors import AuthorizationError, ValidationError
from judgeboard.services.judge_registry import sign_in, sign_out


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-in")
async def sign_in_endpoint(payload: dict):
    email = payload.get("email")
    if not email:
        raise HTTPException(status_code=400, detail="email is required")
    try:
        info = sign_in(email, payload.get("name"))
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except AuthorizationError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc
    return {
        **info,
        "message": "Signed in. Send judgeSessionId as the X-Judge-Session header."
    }


@router.post("/sign-out")
async def sign_out_endpoint(x_judge_session: Optional[str] = Header(None)):
    if not x_judge_session or not sign_out(x_judge_session):
        raise HTTPException(status_code=401, detail="Unauthorized")
    return {"success": True}
