"""
Global application state
Shared resources accessible across all modules
"""
from typing import Dict, List, Optional

from judgeboard.core.store import ScoreStore
from judgeboard.models import JudgeIdentity, Settings, TeamRecord

# Loaded at startup from config/judging.yaml
SETTINGS: Settings = Settings()

# Score backend chosen by SETTINGS.storage.backend
STORE: Optional[ScoreStore] = None

# Teams imported from the spreadsheet export
TEAMS: List[TeamRecord] = []

# Signed-in judges: mapping session-id -> judge identity
JUDGE_SESSIONS: Dict[str, JudgeIdentity] = {}
