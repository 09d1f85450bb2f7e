"""
Database connection and session management for the product service
"""
from typing import Generator
import logging

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine (and its connection pool) for the configured URL."""
    if settings.is_sqlite:
        return create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            echo=settings.LOG_LEVEL.upper() == "DEBUG"
        )
    return create_engine(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        echo=settings.LOG_LEVEL.upper() == "DEBUG"
    )


class Database:
    """
    Owns the engine and session factory for one application instance.

    Opened by the application lifespan and disposed at shutdown; handlers
    reach it through the get_db dependency.
    """

    def __init__(self, settings: Settings):
        self.engine = build_engine(settings)
        self.SessionLocal = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)
        logger.info("Database engine created for %s", self.engine.url.render_as_string(hide_password=True))

    def session(self) -> Session:
        return self.SessionLocal()

    def create_all(self) -> None:
        # Import models to ensure they are registered with Base
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def check_connection(self) -> bool:
        """
        Check if database connection is working.

        Returns:
            bool: True if connection is successful, False otherwise
        """
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error("Database connection check failed: %s", e)
            return False

    def dispose(self) -> None:
        self.engine.dispose()
        logger.info("Database connection pool closed")


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function to get a database session for one request.

    Yields:
        Session: SQLAlchemy database session
    """
    db = request.app.state.database.session()
    try:
        yield db
    finally:
        db.close()
