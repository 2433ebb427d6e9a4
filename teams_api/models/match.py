"""Match model."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer

from teams_api.database import Base


class Match(Base):
    """Match database model."""

    __tablename__ = "matches"

    id = Column(Integer, primary_key=True, index=True)

    # Relaciones
    id_championship = Column(Integer, ForeignKey("championships.id"), nullable=False)
    id_stadium = Column(Integer, ForeignKey("stadiums.id"), nullable=True)
    id_team_principal = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)
    id_team_visitor = Column(Integer, ForeignKey("teams.id"), nullable=False, index=True)

    date = Column(DateTime, nullable=False, index=True)

    # Scores; penalties only meaningful after a shoot-out
    scoreboard_principal = Column(Integer, nullable=False, default=0)
    scoreboard_principal_penalties = Column(Integer, nullable=False, default=0)
    scoreboard_visitor = Column(Integer, nullable=False, default=0)
    scoreboard_visitor_penalties = Column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<Match {self.id}: {self.id_team_principal} vs {self.id_team_visitor}>"
