import os

# Configure the app for tests before anything under app/ reads the environment
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from fastapi import Depends
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
import sys
from pathlib import Path
import hashlib

# Add parent directory to path so main and app modules can be imported
backend_root = Path(__file__).parent.parent
sys.path.insert(0, str(backend_root))

from main import app
from app.database import get_db
from app.models import Base, User, Recipe
from app.utils.auth import get_current_user
import app.utils.password as password_utils
import app.routers.auth as auth_router

# Use in-memory SQLite for tests
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


def _test_hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def _test_verify_password(plain_password: str, hashed_password: str) -> bool:
    return _test_hash_password(plain_password) == hashed_password


password_utils.hash_password = _test_hash_password
password_utils.verify_password = _test_verify_password
auth_router.hash_password = _test_hash_password
auth_router.verify_password = _test_verify_password


@pytest.fixture(autouse=True)
def fresh_schema():
    """Every test starts from empty tables"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def db() -> Session:
    """Get test database session"""
    session = TestingSessionLocal()
    yield session
    session.close()


@pytest.fixture
def client():
    """Get test client"""
    return TestClient(app)


@pytest.fixture
def act_as():
    """Make authenticated requests run as the given user id"""

    def _act_as(user_id: int):
        def override_get_current_user(db: Session = Depends(get_db)) -> User:
            return db.get(User, user_id)

        app.dependency_overrides[get_current_user] = override_get_current_user

    return _act_as


def _make_user(db: Session, username: str, user_id: int = None) -> User:
    user = User(
        user_id=user_id,
        email=f"{username}@example.com",
        username=username,
        hashed_password=_test_hash_password("test123"),
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def _make_recipe(db: Session, owner: User, title: str, recipe_id: int = None) -> Recipe:
    recipe = Recipe(recipe_id=recipe_id, user_id=owner.user_id, title=title)
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


@pytest.fixture
def owner(db: Session) -> User:
    """User who owns the test recipes"""
    return _make_user(db, "owner")


@pytest.fixture
def stranger(db: Session) -> User:
    """User who owns nothing"""
    return _make_user(db, "stranger")


@pytest.fixture
def recipe(db: Session, owner: User) -> Recipe:
    return _make_recipe(db, owner, "Pancakes")


@pytest.fixture
def second_recipe(db: Session, owner: User) -> Recipe:
    """Another recipe of the same owner"""
    return _make_recipe(db, owner, "Omelette")


@pytest.fixture
def make_user(db: Session):
    return lambda username, user_id=None: _make_user(db, username, user_id)


@pytest.fixture
def make_recipe(db: Session):
    return lambda owner, title, recipe_id=None: _make_recipe(db, owner, title, recipe_id)
