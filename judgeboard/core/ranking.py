"""
Ranking: reduce every judge's entries into per-team totals

Rows may come from either store backend, so team keys and score fields are
looked up under both the storage (snake_case) and JSON (camelCase) names.
"""
import math
from typing import Dict, Iterable, List

from judgeboard.models import SCORE_CATEGORIES


UNKNOWN_TEAM = "Unknown Team"

_TEAM_KEYS = ("team_id", "teamId", "teamid")
_LABEL_KEYS = ("team_name", "teamName", "team")


def team_key(row: Dict) -> str:
    """Team id, falling back to team label, then UNKNOWN_TEAM"""
    for key in _TEAM_KEYS + _LABEL_KEYS:
        if row.get(key):
            return str(row[key])
    return UNKNOWN_TEAM


def team_label(row: Dict, key: str) -> str:
    for name in _LABEL_KEYS:
        if row.get(name):
            return str(row[name])
    return key


def row_score(row: Dict) -> float:
    """Sum of the six categories; missing or non-numeric values count as 0"""
    total = 0
    for column, field in SCORE_CATEGORIES:
        value = row.get(column, row.get(field))
        try:
            number = float(value)
        except (TypeError, ValueError):
            continue
        if math.isfinite(number):
            total += number
    return int(total) if float(total).is_integer() else total


def rank(entries: Iterable[Dict]) -> List[Dict]:
    """
    Rank teams by total score across all judges

    Args:
        entries: Flat rows, one per (team, judge)

    Returns:
        [{"teamId", "teamLabel", "total", "judgeCount"}, ...] sorted by total
        descending. Ties keep the order in which teams were first seen.
    """
    groups: Dict[str, Dict] = {}
    for row in entries:
        key = team_key(row)
        if key not in groups:
            groups[key] = {"teamId": key, "teamLabel": team_label(row, key), "total": 0, "judgeCount": 0}
        elif groups[key]["teamLabel"] == key:
            groups[key]["teamLabel"] = team_label(row, key)
        groups[key]["total"] += row_score(row)
        groups[key]["judgeCount"] += 1

    return sorted(groups.values(), key=lambda x: x["total"], reverse=True)
