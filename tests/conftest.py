"""Test configuration and shared fixtures.

Pattern: Pytest fixtures, conftest.py
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from citation_service.core.config import Settings, get_settings
from citation_service.schemas.citations import CitationFields


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with safe defaults."""
    return Settings(
        environment="test",
        log_level="DEBUG",
        default_style="apa",
        reject_unparsable_dates=True,
        include_plain_text=True,
    )


# ============================================================================
# Field Fixtures
# ============================================================================

@pytest.fixture
def book_fields() -> CitationFields:
    """Book fields with two authors."""
    return CitationFields(
        author="Smith, Jones",
        title="T",
        publisher="P",
        year="2020",
    )


@pytest.fixture
def website_fields() -> CitationFields:
    """Website fields without an author."""
    return CitationFields(
        title="T",
        site_name="S",
        url="http://x",
        access_date="2023-01-01",
    )


# ============================================================================
# App Fixtures
# ============================================================================

@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    """Create the application with test settings injected."""
    from citation_service.main import create_app

    application = create_app()
    application.dependency_overrides[get_settings] = lambda: test_settings
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client."""
    return TestClient(app)
