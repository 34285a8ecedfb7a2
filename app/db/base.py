import uuid

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from app.core.config import normalize_database_url, settings

# Skip normalization for SQLite (used in tests)
database_url = normalize_database_url(settings.database_url)

engine = create_engine(database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def generate_id() -> str:
    """Opaque 32-character hex identifier for new documents."""
    return uuid.uuid4().hex
