"""Integration test configuration.

These tests need a migrated PostgreSQL database at ``DATABASE__URL``
(``alembic upgrade head``). They are skipped when it is not set.
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tests.harness import create_env_fixture

INTEGRATION_DIR = Path(__file__).parent

TABLES = (
    "replies, discussions, paper_comments, paper_ratings, papers, "
    "invitations, group_members, groups, users"
)

integration_env = create_env_fixture(unmock={"persistence"})


def pytest_collection_modifyitems(config, items):
    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if INTEGRATION_DIR not in item.path.parents:
            continue
        item.add_marker(pytest.mark.integration)
        if not os.environ.get("DATABASE__URL"):
            item.add_marker(skip)


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Truncate every table before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text(f"TRUNCATE TABLE {TABLES} CASCADE"))
    await session.commit()
    yield
