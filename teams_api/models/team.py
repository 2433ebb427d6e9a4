"""Team model."""

from sqlalchemy import Column, Integer, String

from teams_api.database import Base


class Team(Base):
    """Team database model."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, index=True)
    full_name = Column(String(200), nullable=False)
    name = Column(String(100), nullable=False)
    surname = Column(String(100), nullable=False)
    acronym = Column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Team {self.acronym}>"
