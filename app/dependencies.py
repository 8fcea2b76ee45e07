# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.pokemon_service import PokemonService, load_seed_pokemons


@lru_cache
def get_pokemon_service() -> PokemonService:
    """
    Get the process-wide PokemonService instance.

    Seeds from SEED_FILE when configured, otherwise from the built-in records.
    Tests replace it through app.dependency_overrides.
    """
    if settings.SEED_FILE:
        return PokemonService(load_seed_pokemons(settings.SEED_FILE))
    return PokemonService()


# Type alias for dependency injection
PokemonServiceDep = Annotated[PokemonService, Depends(get_pokemon_service)]
