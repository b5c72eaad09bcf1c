"""
FastAPI main application
Judgeboard - Hackathon Judging Server

Modular architecture with separated API routers in judgeboard/api/:
- health.py: Health check and system status
- auth.py: Judge sign-in / sign-out
- teams.py: Imported team list
- scores.py: Score reads (judge-scoped or admin) and saves
- admin.py: Admin-key gated rankings

All routers access shared state via judgeboard.state module.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
import logging

from judgeboard import state
from judgeboard.config import load_config
from judgeboard.core.store import build_store
from judgeboard.services.team_loader import load_teams

# Import all API routers
from judgeboard.api import health, auth, teams, scores, admin


# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup: load config, open score store, import teams
    try:
        state.SETTINGS = load_config()
        state.STORE = build_store(state.SETTINGS)
        state.TEAMS = load_teams(state.SETTINGS.teams_csv) if state.SETTINGS.teams_csv else []
        logger.info(
            f"✅ Server started with {state.SETTINGS.storage.backend} storage "
            f"and {len(state.TEAMS)} teams"
        )
        if not state.SETTINGS.admin_key:
            logger.warning("⚠️ No admin key configured, rankings are disabled")
    except Exception as e:
        logger.error(f"❌ Failed to start: {e}")
        raise

    yield

    # Shutdown
    state.JUDGE_SESSIONS.clear()
    logger.info("🛑 Server shutting down")


# Create FastAPI app
app = FastAPI(
    title="Judgeboard - Hackathon Judging Server",
    description="Judge scoring, per-judge score storage and team rankings",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware (allow all origins for development)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ==================== INCLUDE ROUTERS ====================

# Health check (GET /)
app.include_router(health.router)

# Judge sessions (POST /auth/sign-in, /auth/sign-out)
app.include_router(auth.router)

# Teams (GET /api/teams)
app.include_router(teams.router)

# Scores (GET/POST /api/scores)
app.include_router(scores.router)

# Admin rankings (GET /admin/rankings)
app.include_router(admin.router)


# ==================== RUN SERVER ====================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
