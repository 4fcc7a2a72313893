"""Shared fixtures: a temporary SQLite database behind the app's get_db dependency."""

import os
from pathlib import Path

# Must be set before the app's database config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine, select  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402
from sqlalchemy.pool import NullPool  # noqa: E402

from app.database import models  # noqa: E402
from app.database.config import Base, get_db  # noqa: E402
from main import app  # noqa: E402


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Create the schema in a fresh SQLite file."""
    path = tmp_path / "issues.sqlite"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def client(db_path: Path):
    """TestClient whose requests use the temporary database."""
    async_engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    session_factory = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def stored_issues(db_path: Path):
    """Return a callable that reads every stored issue, oldest first."""

    def read() -> list[models.Issue]:
        engine = create_engine(f"sqlite:///{db_path}")
        try:
            with Session(engine, expire_on_commit=False) as session:
                return list(session.scalars(select(models.Issue).order_by(models.Issue.id)))
        finally:
            engine.dispose()

    return read
