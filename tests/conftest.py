import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from bistro_api.db import Base, get_db
from bistro_api.main import app

# Force an in-memory SQLite database for testing, shared across connections
TEST_DB_URL = "sqlite://"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fresh tables for every test so generated ids start at 1
@pytest.fixture(autouse=True)
def setup_test_db():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db():
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

# Override the get_db dependency in FastAPI
@pytest.fixture
def client():
    def _get_test_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()
    app.dependency_overrides[get_db] = _get_test_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

@pytest.fixture
def employee(client):
    response = client.post(
        "/api/employees",
        json={"employee": {"name": "Ada", "position": "Cook", "wage": 18.5}},
    )
    return response.json()["employee"]

@pytest.fixture
def menu(client):
    response = client.post("/api/menus", json={"menu": {"title": "Lunch"}})
    return response.json()["menu"]
