"""Pytest fixtures — throwaway SQLite database and a fake business-search provider."""
import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from seatspot.database import Base, get_db
from seatspot.errors import DependencyFailure, NotFound
from seatspot.main import app
from seatspot.services.yelp_client import get_yelp_client
from seatspot.models import User, UserRole

SQLITE_URL = "sqlite:///./test.db"


def make_business(external_id: str = "blue-bottle-sf", name: str = "Blue Bottle Coffee") -> dict:
    """A provider business payload shaped like Yelp's."""
    return {
        "id": external_id,
        "name": name,
        "coordinates": {"latitude": 37.7764, "longitude": -122.4231},
        "location": {
            "address1": "315 Linden St",
            "city": "San Francisco",
            "state": "CA",
            "zip_code": "94102",
            "country": "US",
        },
        "phone": "+15102516801",
        "rating": 4.5,
        "review_count": 1200,
        "categories": [{"alias": "coffee", "title": "Coffee & Tea"}],
        "photos": ["https://example.com/a.jpg"],
        "url": "https://www.yelp.com/biz/" + external_id,
    }


class FakeYelp:
    """In-memory stand-in for YelpClient."""

    def __init__(self):
        self.businesses = {"blue-bottle-sf": make_business()}
        self.fail_with = None
        self.search_calls = []

    def search(self, **params):
        if self.fail_with:
            raise DependencyFailure(self.fail_with)
        self.search_calls.append(params)
        return {"businesses": list(self.businesses.values()), "total": len(self.businesses)}

    def business(self, external_id: str):
        if self.fail_with:
            raise DependencyFailure(self.fail_with)
        if external_id not in self.businesses:
            raise NotFound("Business not found")
        return dict(self.businesses[external_id])


@pytest.fixture(scope="function")
def db_engine():
    """Create a fresh SQLite engine for each test."""
    engine = create_engine(SQLITE_URL, connect_args={"check_same_thread": False})

    # Enable WAL mode for better concurrency
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(db_engine):
    """Yield a database session, closed after the test."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def yelp():
    return FakeYelp()


@pytest.fixture(scope="function")
def client(db_engine, yelp):
    """FastAPI TestClient with the database and provider dependencies overridden."""
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    def _override_get_db():
        session = TestingSession()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_yelp_client] = lambda: yelp
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def auth_headers(user: dict) -> dict:
    return {"Authorization": f"Bearer {user['token']}"}


def create_test_user(client: TestClient, name: str = "alice", password: str = "secret123") -> dict:
    """Helper — register + log in, return the user JSON plus its bearer token."""
    resp = client.post("/api/auth/register", json={"username": name, "password": password})
    assert resp.status_code == 201, resp.text
    login = client.post("/api/auth/login", json={"username": name, "password": password})
    assert login.status_code == 200, login.text
    user = resp.json()
    user["token"] = login.json()["access_token"]
    return user


def create_test_admin(client: TestClient, db_engine, name: str = "admin") -> dict:
    """Helper — a user promoted to admin directly in the database."""
    user = create_test_user(client, name=name)
    Session = sessionmaker(bind=db_engine)
    with Session() as session:
        row = session.query(User).filter(User.user_id == user["user_id"]).one()
        row.role = UserRole.admin
        session.commit()
    user["role"] = "admin"
    return user


def create_test_review(
    client: TestClient,
    author: dict,
    external_id: str = "blue-bottle-sf",
    **overrides,
) -> dict:
    """Helper — POST a seat review for ``author`` and return the response JSON."""
    payload = {
        "seat_type": "sofa",
        "capacity": 2,
        "comfort_rating": "Moderate",
        "has_power_outlet": True,
        "noise_level": "Quiet",
        "description": "Corner sofa by the window",
    }
    payload.update(overrides)
    resp = client.post(
        f"/api/establishments/{external_id}/reviews",
        json=payload,
        headers=auth_headers(author),
    )
    assert resp.status_code == 201, resp.text
    return resp.json()
