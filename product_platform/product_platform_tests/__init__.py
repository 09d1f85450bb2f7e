"""
Tests for the product_service package.

- Login and bearer-token guard (`test_auth.py`)
- Product CRUD endpoints (`test_products.py`)
- Idempotent bootstrap (`test_bootstrap.py`)
- Settings validation (`test_config.py`)
- Health and readiness endpoints (`test_health.py`)
- Logging configuration (`test_logging_setup.py`)
"""
