"""
Shared pytest fixtures for the data abstraction layer test suite.

Fixtures are reusable test setup/data automatically available to all tests.
Just add fixture name as a function parameter to use it.

Types:
    - Data: Raw payloads passed through the abstraction layer
    - Mocks: Fake connectors to test in isolation without a backend
    - Components: Pre-configured class instances ready to use
"""

import pytest
from unittest.mock import MagicMock

from database.abstraction_layer import DbAbstractionLayer
from database.connector import Connector


TEST_INDEX = "test-index"


# ==============================================================================
# DATA FIXTURES
# ==============================================================================

@pytest.fixture
def sample_product() -> dict:
    """Product payload as built by a catalog form."""
    return {
        "name": "Desk lamp",
        "price": 49.9,
        "categoryId": "cat-lighting",
        "tags": ["tag-led", "tag-office"],
    }


@pytest.fixture
def sample_order() -> dict:
    """Order payload saved at checkout."""
    return {
        "userId": "u42",
        "items": [{"productId": "abc123", "count": 2}],
        "total": 99.8,
    }


@pytest.fixture
def sample_query_obj() -> dict:
    """Search query object built by a higher-level service."""
    return {"query": {"ids": {"values": ["abc123", "def456"]}}}


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_connector():
    """Connector double restricted to the Connector capability set."""
    return MagicMock(spec=Connector)


# ==============================================================================
# COMPONENT FIXTURES
# ==============================================================================

@pytest.fixture
def dal(mock_connector) -> DbAbstractionLayer:
    """DbAbstractionLayer wired to the mock connector and a fixed index."""
    return DbAbstractionLayer(connector=mock_connector, index=TEST_INDEX)

