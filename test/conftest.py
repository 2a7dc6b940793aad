from __future__ import annotations

import os
from pathlib import Path

import pytest

# Load dotenv files early so test fixtures can read settings via os.getenv
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent
# Load test/.env first, then fallback to test/.env.example for defaults
load_dotenv(TEST_ROOT / ".env", override=False)
load_dotenv(TEST_ROOT / ".env.example", override=False)

# Import test settings after dotenv is loaded
from test.settings import test_settings

# The package builds its default engine and reads the bcrypt cost at import
# time, so both must point at test values before anything imports it.
os.environ.setdefault("DATABASE_URL", test_settings.database.url)
os.environ.setdefault("BCRYPT_ROUNDS", str(test_settings.security.bcrypt_rounds))


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings


@pytest.fixture(scope="session")
def bcrypt_rounds(test_config) -> int:
    return test_config.security.bcrypt_rounds
