"""
Idempotent schema creation and admin seeding.

Safe to run any number of times: tables are only created when missing and
the admin account is only inserted when no user with that name exists.
"""
import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .auth import hash_password
from .config import Settings, get_settings
from .db import Database
from .models import User
from .utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_tables(database: Database) -> None:
    database.create_all()
    logger.info("Users and products tables created or already exist")


def seed_admin(db: Session, settings: Settings) -> bool:
    """
    Insert the default admin user if it is missing.

    Returns:
        True if a row was inserted, False if the admin already existed
    """
    username = settings.DEFAULT_ADMIN_USERNAME
    if db.query(User).filter(User.username == username).first():
        logger.info("Admin user %s already exists", username)
        return False

    db.add(User(username=username, password_hash=hash_password(settings.DEFAULT_ADMIN_PASSWORD)))
    try:
        db.commit()
    except IntegrityError:
        # Another process seeded the same username after our lookup
        db.rollback()
        logger.info("Admin user %s already exists", username)
        return False
    logger.info("Admin user %s created", username)
    return True


def bootstrap(database: Database, settings: Settings) -> None:
    create_tables(database)
    db = database.session()
    try:
        seed_admin(db, settings)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def main() -> None:
    """Entry point for the product-service-bootstrap command."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_DIR)
    database = Database(settings)
    try:
        bootstrap(database, settings)
    finally:
        database.dispose()


if __name__ == "__main__":
    main()
