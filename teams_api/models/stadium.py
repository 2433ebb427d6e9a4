"""Stadium model."""

from sqlalchemy import Column, Integer, String

from teams_api.database import Base


class Stadium(Base):
    """Stadium database model."""

    __tablename__ = "stadiums"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)

    def __repr__(self) -> str:
        return f"<Stadium {self.name}>"
