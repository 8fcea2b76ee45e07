# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .pokemon_service import PokemonService, load_seed_pokemons

__all__ = [
    "PokemonService",
    "load_seed_pokemons",
]
