# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - pokemon.py: Pokemon record, update payload and seed data
#
# These models define the "contract" between API and clients.
# =============================================================================

from .pokemon import (
    DEFAULT_POKEMONS,
    Pokemon,
    PokemonUpdate,
)

__all__ = [
    "DEFAULT_POKEMONS",
    "Pokemon",
    "PokemonUpdate",
]
