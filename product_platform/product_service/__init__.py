"""
product_service package

This package contains the backend logic for the product service.
It includes:

- FastAPI application factory and lifespan (`main.py`)
- Settings loaded from the environment (`config.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Password hashing, JWT logic and the bearer-token guard (`auth.py`)
- Idempotent table creation and admin seeding (`bootstrap.py`)
- Pydantic schemas (`schemas.py`)
"""
