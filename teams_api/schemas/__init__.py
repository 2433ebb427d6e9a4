"""Response schemas and row mappers."""

from teams_api.schemas.team import Team, team_from_row
from teams_api.schemas.match import Match, match_from_row, parse_match_date

__all__ = ["Team", "Match", "team_from_row", "match_from_row", "parse_match_date"]
