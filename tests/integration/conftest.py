"""Shared fixtures for integration tests."""

import pytest

from pubmed_proxy.config import get_settings
from pubmed_proxy.data_sources.pubmed import PubMedClient


@pytest.fixture
async def pubmed_client():
    """Create and tear down a PubMedClient against the live E-utilities API."""
    settings = get_settings()
    c = PubMedClient(api_key=settings.ncbi_api_key)
    yield c
    await c.close()
