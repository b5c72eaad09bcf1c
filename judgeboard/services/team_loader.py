"""
Team loader from a CSV export of the registration spreadsheet
"""
import csv
import logging
from pathlib import Path
from typing import List, Optional
from urllib.parse import parse_qs, urlparse

from judgeboard import state
from judgeboard.models import TeamRecord


logger = logging.getLogger(__name__)

# Spreadsheet columns A..L, in order
COLUMNS = [
    "team_name", "leader_name", "leader_email", "leader_phone",
    "problem_statement", "deck_link", "live_link", "google_tech",
    "google_ai", "description", "video_link", "github_link",
]


def normalize_video_link(link: Optional[str]) -> Optional[str]:
    """
    Turn share links into embeddable ones

    Example:
        >>> normalize_video_link("https://drive.google.com/file/d/abc/view?usp=sharing")
        'https://drive.google.com/file/d/abc/preview'
        >>> normalize_video_link("https://www.youtube.com/watch?v=xyz")
        'https://www.youtube.com/embed/xyz'
    """
    if not link:
        return None
    if "drive.google.com" in link:
        for suffix in ("/view", "/edit"):
            idx = link.find(suffix + "?")
            if idx != -1:
                return link[:idx] + "/preview"
        return link
    if "youtube.com/watch" in link:
        video_id = parse_qs(urlparse(link).query).get("v", [None])[0]
        return f"https://www.youtube.com/embed/{video_id}" if video_id else link
    return link


def row_to_team(row: List[str], index: int) -> TeamRecord:
    """Map one positional spreadsheet row to a TeamRecord with id TEAM-<index>"""
    cells = [cell.strip() for cell in row] + [""] * (len(COLUMNS) - len(row))
    values = dict(zip(COLUMNS, cells))

    # Optional link/text columns are None when blank
    for key in ("deck_link", "live_link", "google_tech", "google_ai", "description", "github_link"):
        values[key] = values[key] or None
    values["video_link"] = normalize_video_link(values["video_link"])

    return TeamRecord(id=f"TEAM-{index}", **values)


def load_teams(csv_path: str) -> List[TeamRecord]:
    """
    Load teams from CSV file

    CSV format (first row is the sheet header and is skipped):
        Team Name,Leader,Email,Phone,Problem,Deck,Live,Tech,AI,Description,Video,GitHub
        Aurora,Aisha Khan,aisha@example.com,...

    Rows without a team name are ignored; ids are numbered over kept rows.

    Args:
        csv_path: Path to CSV file

    Returns:
        List of TeamRecord, empty if the file does not exist
    """
    path = Path(csv_path)

    if not path.exists():
        logger.warning(f"⚠️ Team file not found: {csv_path}, starting with no teams")
        return []

    with open(path, 'r', encoding='utf-8', newline='') as f:
        rows = list(csv.reader(f))[1:]

    teams = []
    for row in rows:
        if not row or not row[0].strip():
            continue
        teams.append(row_to_team(row, len(teams) + 1))

    logger.info(f"✅ Loaded {len(teams)} teams from {csv_path}")

    return teams


def get_team_name(team_id: str) -> Optional[str]:
    for team in state.TEAMS:
        if team.id == team_id:
            return team.team_name
    return None
