"""
Record shaping shared by both store backends

Rows are flat dicts, one per (team, judge), using storage column names:
    team_id, team_name, judge_email, judge_name,
    problem_relevance, ..., google_tech_use, notes, updated_at
"""
from typing import Dict, Iterable, List, Optional

from judgeboard.models import SCORE_FIELDS, ScoreEntry, TeamScoreRecord


def entry_to_row(team_id: str, entry: ScoreEntry) -> Dict:
    """Flatten one entry into a storage row"""
    row = {
        "team_id": team_id,
        "team_name": entry.team_name,
        "judge_email": entry.updated_by,
        "judge_name": entry.updated_by_name,
    }
    for column in SCORE_FIELDS:
        row[column] = getattr(entry, column)
    row["notes"] = entry.notes
    row["updated_at"] = entry.updated_at
    return row


def row_to_entry(row: Dict) -> ScoreEntry:
    """Inverse of entry_to_row"""
    values = {column: row.get(column) for column in SCORE_FIELDS}
    return ScoreEntry(
        **values,
        notes=row.get("notes") or "",
        updated_at=row.get("updated_at") or "",
        updated_by=row.get("judge_email"),
        updated_by_name=row.get("judge_name"),
        team_name=row.get("team_name"),
    )


def build_record(judges: List[ScoreEntry]) -> TeamScoreRecord:
    """
    Merge a team's per-judge entries into one record

    Top-level fields come from the most recently updated entry (the later one
    in arrival order wins on equal timestamps). `judges` keeps arrival order.
    """
    latest = judges[0]
    for entry in judges[1:]:
        if entry.updated_at >= latest.updated_at:
            latest = entry
    return TeamScoreRecord(**latest.model_dump(), judges=list(judges))


def replace_judge_entry(judges: List[ScoreEntry], entry: ScoreEntry) -> List[ScoreEntry]:
    """Replace the entry with the same judge key in place, or append it"""
    merged = []
    replaced = False
    for existing in judges:
        if existing.updated_by == entry.updated_by:
            merged.append(entry)
            replaced = True
        else:
            merged.append(existing)
    if not replaced:
        merged.append(entry)
    return merged


def rows_to_store(rows: Iterable[Dict]) -> Dict[str, TeamScoreRecord]:
    """Group arrival-ordered rows into team id -> TeamScoreRecord"""
    by_team: Dict[str, List[ScoreEntry]] = {}
    for row in rows:
        by_team.setdefault(row["team_id"], []).append(row_to_entry(row))
    return {team_id: build_record(judges) for team_id, judges in by_team.items()}


def store_to_rows(store: Dict[str, TeamScoreRecord]) -> List[Dict]:
    rows = []
    for team_id, record in store.items():
        for entry in record.judges:
            rows.append(entry_to_row(team_id, entry))
    return rows


def scope_to_judge(store: Dict[str, TeamScoreRecord], judge_id: Optional[str]) -> Dict[str, TeamScoreRecord]:
    """
    Restrict a store to what one judge may see

    Judges only see their own entries; teams they have not scored are dropped.
    A judge_id of None means the full (admin) view.
    """
    if judge_id is None:
        return store
    scoped = {}
    for team_id, record in store.items():
        own = [entry for entry in record.judges if entry.updated_by == judge_id]
        if own:
            scoped[team_id] = build_record(own)
    return scoped


def store_to_json(store: Dict[str, TeamScoreRecord]) -> Dict[str, Dict]:
    """Serialize to the JSON contract (camelCase keys, unset optionals omitted)"""
    return {
        team_id: record.model_dump(by_alias=True, exclude_none=True)
        for team_id, record in store.items()
    }


def store_from_json(data: Dict[str, Dict]) -> Dict[str, TeamScoreRecord]:
    return {team_id: TeamScoreRecord.model_validate(record) for team_id, record in data.items()}
