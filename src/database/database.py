"""Database initialization and session management"""

import logging
import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from src.database.models import Base

logger = logging.getLogger("studypilot.database")

# Database path
DB_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "data")
DB_PATH = os.path.join(DB_DIR, "studypilot.db")

# SQLite connection string, overridable for other locations
DATABASE_URL = os.getenv("STUDYPILOT_DATABASE_URL", f"sqlite:///{DB_PATH}")

if DATABASE_URL.startswith("sqlite"):
    if DATABASE_URL == f"sqlite:///{DB_PATH}":
        os.makedirs(DB_DIR, exist_ok=True)
    # Create engine with connection pooling for SQLite
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},  # Needed for SQLite
        poolclass=StaticPool,
        echo=False  # Set to True for SQL query logging
    )
else:
    engine = create_engine(DATABASE_URL, echo=False)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Initialize database - create all tables"""
    logger.info("Creating tables on %s", engine.url)
    Base.metadata.create_all(bind=engine)


def get_db_session() -> Session:
    """Get a new database session"""
    return SessionLocal()
