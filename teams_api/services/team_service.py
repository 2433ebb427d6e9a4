"""Team data access service."""

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, aliased

from teams_api.core.errors import NotFoundError, StoreError
from teams_api.models import Championship, Match as MatchRow, Stadium, Team as TeamRow
from teams_api.schemas import Match, Team, match_from_row, team_from_row

logger = logging.getLogger(__name__)


class TeamService:
    """Read-only queries for teams and their matches."""

    def __init__(self, db: Session, clock: Callable[[], datetime] = datetime.now) -> None:
        """
        Initialize the service.

        Args:
            db: Database session owned by the current request
            clock: Returns the current instant; matches before it count as played
        """
        self.db = db
        self.clock = clock

    def get_team_by_id(self, team_id: int) -> Team:
        """
        Get a team by primary key.

        Raises:
            NotFoundError: No team has this id
            StoreError: The query could not be executed
        """
        query = select(
            TeamRow.id,
            TeamRow.full_name,
            TeamRow.name,
            TeamRow.surname,
            TeamRow.acronym,
        ).where(TeamRow.id == team_id)

        row = self._fetch_one(query, "get_team_by_id", team_id)
        if row is None:
            raise NotFoundError("Team", team_id)
        return team_from_row(row)

    def get_last_played_match(self, team_id: int) -> Match:
        """
        Get the most recent match dated before now in which the team took part.

        Matches sharing the same date are ordered by id, highest first.

        Raises:
            NotFoundError: The team has no match in the past
            StoreError: The query could not be executed
        """
        principal = aliased(TeamRow, name="principal")
        visitor = aliased(TeamRow, name="visitor")

        query = (
            select(
                MatchRow.id,
                MatchRow.date,
                Championship.name.label("championship"),
                Stadium.name.label("stadium"),
                principal.name.label("team_principal"),
                MatchRow.scoreboard_principal,
                MatchRow.scoreboard_principal_penalties,
                visitor.name.label("team_visitor"),
                MatchRow.scoreboard_visitor,
                MatchRow.scoreboard_visitor_penalties,
            )
            .join(Championship, Championship.id == MatchRow.id_championship)
            .join(principal, principal.id == MatchRow.id_team_principal)
            .join(visitor, visitor.id == MatchRow.id_team_visitor)
            .outerjoin(Stadium, Stadium.id == MatchRow.id_stadium)
            .where(
                MatchRow.date < self.clock(),
                or_(
                    MatchRow.id_team_principal == team_id,
                    MatchRow.id_team_visitor == team_id,
                ),
            )
            .order_by(MatchRow.date.desc(), MatchRow.id.desc())
            .limit(1)
        )

        row = self._fetch_one(query, "get_last_played_match", team_id)
        if row is None:
            raise NotFoundError("Last match played", team_id)
        return match_from_row(row)

    def _fetch_one(self, query, operation: str, team_id: int):
        """Execute ``query`` and return its first row as a mapping, or None."""
        try:
            return self.db.execute(query).mappings().first()
        except SQLAlchemyError as e:
            logger.error(
                f"Database error in {operation}: {e}",
                extra={"operation": operation, "team_id": team_id},
            )
            raise StoreError(str(e), operation) from e
