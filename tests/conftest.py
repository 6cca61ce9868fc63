"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/                  # Fast, isolated tests (mocked repositories)
    │   ├── domain/
    │   ├── application/
    │   ├── stockroom_auth/
    │   └── config/
    └── integration/
        └── api/               # FastAPI TestClient against in-memory SQLite
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from stockroom_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that exercise the HTTP API and the database",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Make sure every test session starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
