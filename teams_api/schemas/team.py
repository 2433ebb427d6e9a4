"""Team schema and row mapping."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from teams_api.core.errors import MappingError

TEAM_COLUMNS = ("id", "full_name", "name", "surname", "acronym")


class Team(BaseModel):
    """Team record as returned by the API."""

    id: int = Field(..., description="Unique team identifier")
    full_name: str = Field(..., description="Official full name")
    name: str = Field(..., description="Short name")
    surname: str = Field(..., description="Nickname")
    acronym: str = Field(..., description="Acronym, e.g. COR")


def require_columns(row: Mapping[str, Any], columns: tuple[str, ...]) -> None:
    """Raise MappingError for the first column missing from ``row``."""
    for column in columns:
        if column not in row:
            raise MappingError(f"Missing column '{column}'", column=column)


def team_from_row(row: Mapping[str, Any]) -> Team:
    """Convert a ``teams`` row into a Team."""
    require_columns(row, TEAM_COLUMNS)
    try:
        return Team(**{column: row[column] for column in TEAM_COLUMNS})
    except ValidationError as e:
        raise MappingError(f"Invalid team row: {e}") from e
