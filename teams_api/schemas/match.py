"""Match schema and row mapping."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from teams_api.core.errors import MappingError
from teams_api.schemas.team import require_columns

# Store-native timestamp text form
MATCH_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MATCH_COLUMNS = (
    "id",
    "championship",
    "date",
    "team_principal",
    "scoreboard_principal",
    "scoreboard_principal_penalties",
    "team_visitor",
    "scoreboard_visitor",
    "scoreboard_visitor_penalties",
)


class Match(BaseModel):
    """Match record as returned by the API."""

    id: int = Field(..., description="Unique match identifier")
    championship: str = Field(..., description="Championship name")
    stadium: str | None = Field(None, description="Stadium name, when known")
    date: datetime = Field(..., description="Date and time of play")
    team_principal: str
    scoreboard_principal: int
    scoreboard_principal_penalties: int
    team_visitor: str
    scoreboard_visitor: int
    scoreboard_visitor_penalties: int


def parse_match_date(value: Any) -> datetime:
    """Parse a match date.

    Text must match ``YYYY-MM-DD HH:MM:SS`` exactly. Drivers that already
    return a datetime are passed through untouched.
    """
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise MappingError(f"Unsupported date value {value!r}", column="date")
    try:
        return datetime.strptime(value, MATCH_DATE_FORMAT)
    except ValueError as e:
        raise MappingError(f"Time parsing error: {e}", column="date") from e


def match_from_row(row: Mapping[str, Any]) -> Match:
    """Convert a joined matches row into a Match."""
    require_columns(row, MATCH_COLUMNS)
    data = {column: row[column] for column in MATCH_COLUMNS}
    data["date"] = parse_match_date(row["date"])
    # Only present when the query joins stadiums
    if "stadium" in row:
        data["stadium"] = row["stadium"]
    try:
        return Match(**data)
    except ValidationError as e:
        raise MappingError(f"Invalid match row: {e}") from e
