"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Isolation of migration defaults from the developer's shell
"""

from __future__ import annotations

import pytest
from dotenv import load_dotenv

from src.config import list_environment_variables

# Load environment variables from .env file
load_dotenv()


@pytest.fixture(autouse=True)
def _clear_migration_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test against the built-in migration defaults."""
    for var in list_environment_variables("migration"):
        monkeypatch.delenv(var.value.name, raising=False)

