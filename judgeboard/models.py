"""
Data models for the judging server
"""
import math
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional


MIN_SCORE = 0
MAX_SCORE = 15

# Storage column name -> JSON field name
SCORE_CATEGORIES = (
    ("problem_relevance", "problemRelevance"),
    ("technical_feasibility", "technicalFeasibility"),
    ("statement_alignment", "statementAlignment"),
    ("creativity", "creativity"),
    ("presentation", "presentation"),
    ("google_tech_use", "googleTechUse"),
)

SCORE_FIELDS = tuple(column for column, _ in SCORE_CATEGORIES)


def clamp_score(value) -> int:
    """
    Coerce a submitted sub-score to an int in [MIN_SCORE, MAX_SCORE]

    Empty values count as 0, infinities clamp to the nearest bound.
    Raises ValueError for NaN and anything non-numeric.
    """
    if value is None or value == "":
        return MIN_SCORE
    if not isinstance(value, int):
        try:
            value = float(value)
        except (TypeError, ValueError):
            raise ValueError(f"score must be a number, got {value!r}")
        if math.isnan(value):
            raise ValueError("score must be a number, got NaN")
    # ints of any size and infinities compare fine against the bounds
    if value <= MIN_SCORE:
        return MIN_SCORE
    if value >= MAX_SCORE:
        return MAX_SCORE
    return int(value)


class ScoreEntry(BaseModel):
    """One judge's evaluation of one team"""
    model_config = ConfigDict(populate_by_name=True)

    problem_relevance: int = Field(0, alias="problemRelevance")
    technical_feasibility: int = Field(0, alias="technicalFeasibility")
    statement_alignment: int = Field(0, alias="statementAlignment")
    creativity: int = 0
    presentation: int = 0
    google_tech_use: int = Field(0, alias="googleTechUse")
    notes: str = ""
    updated_at: str = Field("", alias="updatedAt")      # ISO-8601
    updated_by: Optional[str] = Field(None, alias="updatedBy")  # judge key (email)
    updated_by_name: Optional[str] = Field(None, alias="updatedByName")
    team_name: Optional[str] = Field(None, alias="teamName")

    @field_validator(*SCORE_FIELDS, mode="before")
    @classmethod
    def _clamp(cls, value):
        return clamp_score(value)

    @field_validator("notes", mode="before")
    @classmethod
    def _notes(cls, value):
        return value or ""

    @property
    def total(self) -> int:
        return sum(getattr(self, column) for column in SCORE_FIELDS)


class TeamScoreRecord(ScoreEntry):
    """Merged view for one team: latest entry plus every judge's entry"""
    judges: List[ScoreEntry] = Field(default_factory=list)


class JudgeIdentity(BaseModel):
    email: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.email


class TeamRecord(BaseModel):
    """Team imported from the spreadsheet export"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    team_name: str = Field(alias="teamName")
    leader_name: str = Field("", alias="leaderName")
    leader_email: str = Field("", alias="leaderEmail")
    leader_phone: str = Field("", alias="leaderPhone")
    problem_statement: str = Field("", alias="problemStatement")
    deck_link: Optional[str] = Field(None, alias="deckLink")
    live_link: Optional[str] = Field(None, alias="liveLink")
    google_tech: Optional[str] = Field(None, alias="googleTech")
    google_ai: Optional[str] = Field(None, alias="googleAI")
    description: Optional[str] = None
    video_link: Optional[str] = Field(None, alias="videoLink")
    github_link: Optional[str] = Field(None, alias="githubLink")


class StorageSettings(BaseModel):
    backend: str = "file"  # "file" | "sqlite"
    scores_path: str = "data/scores.json"
    sqlite_path: str = "data/judging.sqlite"


class Settings(BaseModel):
    """Server configuration (config/judging.yaml)"""
    storage: StorageSettings = Field(default_factory=StorageSettings)
    teams_csv: Optional[str] = "data/teams.csv"
    admin_key: Optional[str] = None
    judges: List[str] = Field(default_factory=list)  # allowlisted emails, empty = anyone
