"""
Pytest Configuration and Fixtures

This module provides:
- Project root on sys.path so `src` and `main` import
- Shared fixtures for all tests
- Test category markers
"""

import pytest
import sys
from pathlib import Path
from unittest.mock import Mock

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import (
    CONFIG, EXPECTED, TEST_DATA, MESSAGES, TEST_CATEGORIES,
    get_search_results, get_settings_kwargs,
)


# =============================================================================
# MARKERS FOR TEST CATEGORIES
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    for marker, info in TEST_CATEGORIES.items():
        config.addinivalue_line("markers", f"{marker}: {info['description']}")


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Settings populated with fake credentials."""
    from src.config import Settings
    return Settings(**get_settings_kwargs())


@pytest.fixture
def related_items():
    """Two RelatedItem instances built from the sample search response."""
    from src.models.idea_record import RelatedItem
    return [RelatedItem.from_search_result(r) for r in get_search_results()]


@pytest.fixture
def mock_search_response():
    """Mock successful Tavily HTTP response."""
    response = Mock()
    response.ok = True
    response.status_code = 200
    response.reason = "OK"
    response.json.return_value = TEST_DATA["search_response"]
    return response


@pytest.fixture
def mock_error_response():
    """Mock Tavily HTTP 500 response."""
    response = Mock()
    response.ok = False
    response.status_code = 500
    response.reason = "Internal Server Error"
    return response


@pytest.fixture
def mock_genai_client():
    """Mock google-genai client whose model replies with valid JSON."""
    client = Mock()
    client.models.generate_content.return_value = Mock(text=TEST_DATA["model_reply"])
    return client


@pytest.fixture
def memory_store():
    """A MemoryIdeaStore instance."""
    from src.storage.mongo import MemoryIdeaStore
    return MemoryIdeaStore()


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def test_data():
    """Provide access to test data."""
    return TEST_DATA
