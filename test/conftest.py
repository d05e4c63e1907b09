from __future__ import annotations

from pathlib import Path

import pytest
from dotenv import load_dotenv

TEST_ROOT = Path(__file__).resolve().parent

# Load dotenv files early so fixtures and settings see the same variables
load_dotenv(TEST_ROOT / ".env", override=False)

from test.settings import test_settings  # noqa: E402


@pytest.fixture(scope="session")
def test_config():
    """Fixture providing test configuration from Pydantic settings model.

    Returns:
        TestSettings: Test configuration with all environment variables loaded
    """
    return test_settings
