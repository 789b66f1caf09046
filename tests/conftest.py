"""Test configuration and shared fixtures.

Pattern: Pytest fixtures, conftest.py
"""

from collections.abc import Iterator

import pytest

from pset_cache.cache.manager import CacheManager, close_session, open_session
from pset_cache.core.config import Settings
from pset_cache.document.memory import InMemoryPropertyDocument
from tests.fakes.fake_factory import FakeRecordFactory


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with safe defaults."""
    return Settings(
        environment="test",
        log_level="DEBUG",
        eps=1e-6,
        cache_all_label_strings=False,
        lookup_max_depth=8,
    )


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def document() -> InMemoryPropertyDocument:
    """Create an empty in-memory output document."""
    return InMemoryPropertyDocument(name="test_document")


@pytest.fixture
def manager(
    document: InMemoryPropertyDocument,
    test_settings: Settings,
) -> Iterator[CacheManager]:
    """Open a cache session writing to the in-memory document."""
    manager = open_session(document, settings=test_settings, session_id="test_session")
    yield manager
    close_session(manager)


@pytest.fixture
def fake_factory() -> FakeRecordFactory:
    """Create a recording record factory."""
    return FakeRecordFactory()


@pytest.fixture
def fake_manager(
    fake_factory: FakeRecordFactory,
    test_settings: Settings,
) -> Iterator[CacheManager]:
    """Open a cache session writing to the recording factory."""
    manager = open_session(fake_factory, settings=test_settings, session_id="fake_session")
    yield manager
    close_session(manager)
