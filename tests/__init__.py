# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Pokedex API:
# - test_models.py: Unit tests for Pydantic model validation
# - test_pokemon_service.py: Tests for the in-memory pokemon store
# - test_pokemon_routes.py: Endpoint tests through TestClient
# - test_app.py: Docs, health, error handlers and settings
#
# Run tests with: poetry run pytest
# =============================================================================
