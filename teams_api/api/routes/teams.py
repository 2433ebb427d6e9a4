"""Team routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teams_api.core.errors import InvalidIdentifierError, NotFoundError
from teams_api.database import get_db
from teams_api.schemas import Match, Team
from teams_api.services import TeamService

router = APIRouter()

MAX_TEAM_ID = 2**63 - 1
MAX_TEAM_ID_DIGITS = len(str(MAX_TEAM_ID))


def parse_team_id(raw_id: str, resource: str = "Team") -> int:
    """Parse a path segment as a positive integer id.

    Ids beyond the store's BIGINT range cannot have a row and are reported
    as not found without querying.
    """
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise InvalidIdentifierError(raw_id)
    digits = raw_id.lstrip("0")
    if not digits:
        raise InvalidIdentifierError(raw_id)
    # Length check first: int() refuses very long digit strings
    if len(digits) > MAX_TEAM_ID_DIGITS or int(digits) > MAX_TEAM_ID:
        raise NotFoundError(resource, digits)
    return int(digits)


def get_team_service(db: Session = Depends(get_db)) -> TeamService:
    """Provide a TeamService bound to the request's session."""
    return TeamService(db)


@router.get("/{team_id}", response_model=Team)
def get_team(team_id: str, service: TeamService = Depends(get_team_service)) -> Team:
    """Get a team by ID."""
    return service.get_team_by_id(parse_team_id(team_id))


@router.get("/{team_id}/lastMatchPlayed", response_model=Match)
def get_last_match_played(
    team_id: str, service: TeamService = Depends(get_team_service)
) -> Match:
    """Get the most recent match the team has played."""
    return service.get_last_played_match(parse_team_id(team_id, "Last match played"))
