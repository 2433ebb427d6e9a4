"""Services package."""

from teams_api.services.team_service import TeamService

__all__ = ["TeamService"]
