import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_game_rental.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["FRONTEND_URL"] = ""

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from app.main import app


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    # Use a temporary file for SQLite database
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    # Create test engine and session with proper SQLite settings
    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        # Dispose the engine to close all connections
        test_engine.dispose()

        # Clean up - remove test database file and directory
        try:
            if os.path.exists(test_db_path):
                os.remove(test_db_path)
            # Also remove WAL files
            for suffix in ["-wal", "-shm"]:
                wal_path = f"{test_db_path}{suffix}"
                if os.path.exists(wal_path):
                    os.remove(wal_path)
            if os.path.exists(temp_db_dir):
                os.rmdir(temp_db_dir)
        except OSError as e:
            print(f"Cleanup failed: {e}")


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from app.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def game_factory(db: Session):
    """Create games directly through the repository."""
    from app.repositories.game import create_game

    def _create(title: str, platform: str = "SNES", **fields):
        defaults = {
            "genre": ["RPG"],
            "explore": [],
            "developer": ["Square"],
            "publisher": "Square",
            "description": "",
            "esrb_rating": "E",
        }
        defaults.update(fields)
        return create_game(db, title=title, platform=platform, **defaults)

    return _create


@pytest.fixture(scope="function")
def contract_factory(db: Session):
    """Create contracts directly through the repository."""
    from app.repositories.contract import create_contract

    def _create(game_id: str | None = None, customer_info: dict | None = None, **fields):
        fields.setdefault("status", "Pending")
        return create_contract(db, game_id=game_id, customer_info=customer_info, **fields)

    return _create


@pytest.fixture(scope="function")
def account_factory(db: Session):
    """Create accounts directly through the repository."""
    from app.repositories.account import create_account

    def _create(username: str, contract_ids: list[str] | None = None):
        return create_account(db, username=username, contract_ids=contract_ids or [])

    return _create
