"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from polydict.config import Settings
from polydict.container import Container, build_container
from polydict.main import create_app
from polydict.models import Language
from polydict.services.catalog import LanguageCatalog
from polydict.services.engines.glossary import GlossaryEngine
from polydict.services.registry import EngineRegistry


@pytest.fixture
def catalog() -> LanguageCatalog:
    """A fresh catalog with the default languages."""
    return LanguageCatalog.with_defaults()


@pytest.fixture
def german(catalog: LanguageCatalog) -> Language:
    return catalog.language("de", "german")


@pytest.fixture
def english(catalog: LanguageCatalog) -> Language:
    return catalog.language("en", "english")


@pytest.fixture
def french(catalog: LanguageCatalog) -> Language:
    return catalog.language("fr", "french")


@pytest.fixture
def registry(catalog: LanguageCatalog) -> EngineRegistry:
    return EngineRegistry(catalog)


@pytest.fixture
def test_settings() -> Settings:
    """Settings that ignore the environment's .env file."""
    return Settings(_env_file=None, glossary_enabled=False, engine_timeout_seconds=1.0)


@pytest.fixture
def sample_glossary_data() -> dict[str, Any]:
    """Inline glossary for testing."""
    return {
        "name": "Test glossary",
        "languages": {"de": "german", "en": "english"},
        "dictionaries": [
            {"query": "de-en", "bidirectional": True},
            {"query": "en-fr"},
        ],
        "entries": {
            "de-en": [["Haus", "house", "noun"], ["Baum", "tree"]],
            "en-fr": [["house", "maison"]],
        },
    }


@pytest.fixture
def container(
    test_settings: Settings,
    catalog: LanguageCatalog,
    sample_glossary_data: dict[str, Any],
) -> Container:
    """A container with an inline glossary engine registered."""
    engine = GlossaryEngine(catalog, data=sample_glossary_data)
    return build_container(test_settings, engines=[engine], catalog=catalog)


@pytest.fixture
def test_app(container: Container) -> FastAPI:
    """Create a test FastAPI application."""
    return create_app(container)


@pytest_asyncio.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client
