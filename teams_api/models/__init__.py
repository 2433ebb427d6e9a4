"""Database models package."""

from teams_api.models.championship import Championship
from teams_api.models.stadium import Stadium
from teams_api.models.team import Team
from teams_api.models.match import Match

__all__ = ["Championship", "Stadium", "Team", "Match"]
