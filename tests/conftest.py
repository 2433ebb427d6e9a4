"""Shared test fixtures."""

from collections.abc import Callable, Generator
from datetime import datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from prometheus_client import CollectorRegistry
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from teams_api.database import Base, get_db
from teams_api.main import create_app
from teams_api.models import Championship, Match, Stadium, Team


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with the full schema."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine: Engine) -> Generator[Session, None, None]:
    """Session bound to the test engine."""
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def registry() -> CollectorRegistry:
    """Isolated Prometheus registry."""
    return CollectorRegistry()


@pytest.fixture
def app(engine: Engine, registry: CollectorRegistry) -> FastAPI:
    """Application wired to the test engine and registry."""
    app = create_app(registry=registry, use_lifespan=False)
    session_factory = sessionmaker(bind=engine)

    def override_get_db() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Test client for the application."""
    return TestClient(app)


@pytest.fixture
def add_team(db: Session) -> Callable[..., Team]:
    """Insert a team row."""

    def _add_team(team_id: int, full_name: str, name: str, surname: str, acronym: str) -> Team:
        team = Team(id=team_id, full_name=full_name, name=name, surname=surname, acronym=acronym)
        db.add(team)
        db.commit()
        return team

    return _add_team


@pytest.fixture
def add_match(db: Session) -> Callable[..., Match]:
    """Insert a match row, creating its championship on first use."""

    def _add_match(
        match_id: int,
        principal_id: int,
        visitor_id: int,
        date: datetime,
        score: tuple[int, int] = (0, 0),
        penalties: tuple[int, int] = (0, 0),
        championship: str = "Brasileirão Série A",
        stadium_id: int | None = None,
    ) -> Match:
        champ = db.query(Championship).filter(Championship.name == championship).first()
        if champ is None:
            champ = Championship(name=championship)
            db.add(champ)
            db.flush()
        match = Match(
            id=match_id,
            id_championship=champ.id,
            id_stadium=stadium_id,
            id_team_principal=principal_id,
            id_team_visitor=visitor_id,
            date=date,
            scoreboard_principal=score[0],
            scoreboard_visitor=score[1],
            scoreboard_principal_penalties=penalties[0],
            scoreboard_visitor_penalties=penalties[1],
        )
        db.add(match)
        db.commit()
        return match

    return _add_match


@pytest.fixture
def add_stadium(db: Session) -> Callable[[int, str], Stadium]:
    """Insert a stadium row."""

    def _add_stadium(stadium_id: int, name: str) -> Stadium:
        stadium = Stadium(id=stadium_id, name=name)
        db.add(stadium)
        db.commit()
        return stadium

    return _add_stadium


@pytest.fixture
def seeded(add_team) -> None:
    """Two teams used across tests."""
    add_team(42, "Sport Club Corinthians Paulista", "Corinthians", "Timão", "COR")
    add_team(7, "Sociedade Esportiva Palmeiras", "Palmeiras", "Verdão", "PAL")
