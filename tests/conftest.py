# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Gives every test its own PokemonService through dependency overrides
# =============================================================================

import json
import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_pokemon_service
from app.main import app
from core.services.pokemon_service import PokemonService


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def pokemon_service():
    """Fresh service seeded with the four default pokemons."""
    return PokemonService()


@pytest.fixture
def client(pokemon_service):
    """
    TestClient wired to the per-test pokemon_service.

    Overrides the cached process-wide service so tests don't leak state.
    """
    app.dependency_overrides[get_pokemon_service] = lambda: pokemon_service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_pokemon_service, None)


@pytest.fixture
def sample_pokemon_dict():
    """Sample pokemon payload for testing."""
    return {"id": 25, "name": "Eevee", "type": "Normal"}


@pytest.fixture
def seed_file(tmp_path):
    """JSON seed file holding two pokemons."""
    path = tmp_path / "seed.json"
    path.write_text(json.dumps([
        {"id": 7, "name": "Psyduck", "type": "Water"},
        {"id": 8, "name": "Growlithe", "type": "Fire"},
    ]))
    return path
