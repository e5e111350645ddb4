import sys
from datetime import date
from pathlib import Path

# Add backend directory to Python path FIRST
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

# Now import after path is set
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, build_engine, get_db
from init_db import init_database
from dependencies import get_user_service
from services.user_service import UserService

FIXED_TODAY = date(2024, 6, 15)


@pytest.fixture
def engine():
    """In-memory database shared across threads for the lifetime of a test"""
    engine = build_engine('sqlite://', poolclass=StaticPool)
    init_database(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create in-memory database for testing"""
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def user_service(db_session):
    return UserService(db_session, today=lambda: FIXED_TODAY)


@pytest.fixture
def app():
    from main import app
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, db_session):
    """TestClient wired to the in-memory database with a fixed clock"""
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_user_service] = lambda: UserService(db_session, today=lambda: FIXED_TODAY)
    return TestClient(app)
