import os
from datetime import date
from pathlib import Path

os.environ.setdefault("PYTEST_RUN", "1")

from dotenv import load_dotenv  # noqa: E402

# Load environment variables for tests
load_dotenv(Path(__file__).resolve().parents[1] / ".env.test")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.api.dependencies import get_db, get_today  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Business, ServiceProvider  # noqa: E402
from app.models.base import BaseModel  # noqa: E402

TODAY = date(2025, 1, 15)
BUSINESS_ID = "biz-1"


@pytest.fixture
def Session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    BaseModel.metadata.create_all(engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    db = factory()
    db.add(Business(id=BUSINESS_ID, name="Sparkle Cleaning"))
    db.commit()
    db.close()
    yield factory
    engine.dispose()


@pytest.fixture
def db(Session):
    session = Session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(Session):
    def override_db():
        session = Session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_db
    app.dependency_overrides[get_today] = lambda: TODAY
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def provider(db):
    p = ServiceProvider(
        id="prov-1",
        business_id=BUSINESS_ID,
        first_name="Maria",
        last_name="Lopez",
        email="maria@example.com",
        phone="555-0100",
    )
    db.add(p)
    db.commit()
    return p
