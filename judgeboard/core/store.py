"""
Score stores: durable (team, judge) -> ScoreEntry mapping

Two interchangeable backends behind the ScoreStore interface:
- JsonFileScoreStore: one JSON object rewritten wholesale on every save.
  Writers are serialized with an in-process lock, so it assumes a single
  server process.
- SqliteScoreStore: one row per (team, judge) with a unique constraint,
  saved with a single-row upsert.
"""
import json
import logging
import os
import sqlite3
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from judgeboard.core import records
from judgeboard.core.errors import StorageError
from judgeboard.models import SCORE_FIELDS, JudgeIdentity, ScoreEntry, Settings, TeamScoreRecord


logger = logging.getLogger(__name__)


class ScoreStore(ABC):
    """Capability interface every backend implements"""

    @abstractmethod
    def get_all(self, judge_id: Optional[str] = None) -> Dict[str, TeamScoreRecord]:
        """Merged view of every team, or only judge_id's own entries when given"""

    @abstractmethod
    def upsert(self, team_id: str, judge: JudgeIdentity, entry: ScoreEntry) -> TeamScoreRecord:
        """Insert or replace the entry for (team_id, judge.email)"""

    @abstractmethod
    def entries(self) -> List[Dict]:
        """Flat rows, one per (team, judge), for ranking"""


def _stamp(entry: ScoreEntry, judge: JudgeIdentity) -> ScoreEntry:
    return entry.model_copy(update={
        "updated_by": judge.email,
        "updated_by_name": judge.display_name,
    })


class JsonFileScoreStore(ScoreStore):
    def __init__(self, path: str):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, TeamScoreRecord]:
        if not self.path.exists():
            self._save({})
            logger.info(f"📄 Created empty score file at {self.path}")
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return records.store_from_json(data)
        except (OSError, ValueError) as e:
            # ValueError also covers JSON decode and pydantic validation errors
            raise StorageError(f"Failed to read score file {self.path}: {e}") from e

    def _save(self, store: Dict[str, TeamScoreRecord]) -> None:
        """Write to a temp file next to the target, then atomically replace it"""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".scores-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(records.store_to_json(store), f, indent=2, ensure_ascii=False)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageError(f"Failed to write score file {self.path}: {e}") from e

    def get_all(self, judge_id: Optional[str] = None) -> Dict[str, TeamScoreRecord]:
        with self._lock:
            store = self._load()
        return records.scope_to_judge(store, judge_id)

    def upsert(self, team_id: str, judge: JudgeIdentity, entry: ScoreEntry) -> TeamScoreRecord:
        entry = _stamp(entry, judge)
        with self._lock:
            store = self._load()
            current = store.get(team_id)
            judges = records.replace_judge_entry(current.judges if current else [], entry)
            record = records.build_record(judges)
            store[team_id] = record
            self._save(store)
        return record

    def entries(self) -> List[Dict]:
        with self._lock:
            store = self._load()
        return records.store_to_rows(store)


_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS scores (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    team_id TEXT NOT NULL,
    team_name TEXT,
    judge_email TEXT NOT NULL,
    judge_name TEXT,
    problem_relevance INTEGER NOT NULL DEFAULT 0,
    technical_feasibility INTEGER NOT NULL DEFAULT 0,
    statement_alignment INTEGER NOT NULL DEFAULT 0,
    creativity INTEGER NOT NULL DEFAULT 0,
    presentation INTEGER NOT NULL DEFAULT 0,
    google_tech_use INTEGER NOT NULL DEFAULT 0,
    notes TEXT NOT NULL DEFAULT '',
    updated_at TEXT NOT NULL,
    UNIQUE(team_id, judge_email)
);
"""

_ROW_COLUMNS = ("team_id", "team_name", "judge_email", "judge_name") + SCORE_FIELDS + ("notes", "updated_at")

# id survives ON CONFLICT DO UPDATE, so ORDER BY id is arrival order
_UPSERT = (
    f"INSERT INTO scores({', '.join(_ROW_COLUMNS)}) "
    f"VALUES({', '.join('?' for _ in _ROW_COLUMNS)}) "
    "ON CONFLICT(team_id, judge_email) DO UPDATE SET "
    + ", ".join(f"{c}=excluded.{c}" for c in _ROW_COLUMNS if c not in ("team_id", "judge_email"))
)


class SqliteScoreStore(ScoreStore):
    def __init__(self, path: str):
        self.path = path
        try:
            Path(path).parent.mkdir(parents=True, exist_ok=True)
            conn = self._connect()
            try:
                with conn:
                    conn.executescript(_CREATE_TABLE)
            finally:
                conn.close()
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Failed to initialize score database {path}: {e}") from e

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        return conn

    def _select(self, where: str = "", params: tuple = ()) -> List[Dict]:
        try:
            conn = self._connect()
            try:
                rows = conn.execute(f"SELECT * FROM scores {where} ORDER BY id", params).fetchall()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read scores: {e}") from e
        return [dict(row) for row in rows]

    def get_all(self, judge_id: Optional[str] = None) -> Dict[str, TeamScoreRecord]:
        if judge_id is None:
            return records.rows_to_store(self._select())
        return records.rows_to_store(self._select("WHERE judge_email=?", (judge_id,)))

    def upsert(self, team_id: str, judge: JudgeIdentity, entry: ScoreEntry) -> TeamScoreRecord:
        row = records.entry_to_row(team_id, _stamp(entry, judge))
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(_UPSERT, tuple(row[c] for c in _ROW_COLUMNS))
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to save score for {team_id}: {e}") from e
        return records.rows_to_store(self._select("WHERE team_id=?", (team_id,)))[team_id]

    def entries(self) -> List[Dict]:
        return self._select()


def build_store(settings: Settings) -> ScoreStore:
    """Create the backend named in settings.storage.backend"""
    backend = settings.storage.backend.strip().lower()
    if backend == "file":
        return JsonFileScoreStore(settings.storage.scores_path)
    if backend == "sqlite":
        return SqliteScoreStore(settings.storage.sqlite_path)
    raise ValueError(f"Unknown storage backend: {settings.storage.backend}")
