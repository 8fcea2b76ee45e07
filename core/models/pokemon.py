# =============================================================================
# core/models/pokemon.py - Pokemon Schemas
# =============================================================================
# These models define the API contract for pokemon operations:
# - Pokemon: A stored record, also the body of POST /pokemons
# - PokemonUpdate: Body of PUT /pokemons/{id}
# - DEFAULT_POKEMONS: Seed data a fresh service starts with
#
# Only id is required; a missing name or type binds to null.
# Identifiers are NOT unique.
# =============================================================================

from pydantic import BaseModel, Field


class Pokemon(BaseModel):
    """
    A single pokemon record.

    Example:
        {
            "id": 25,
            "name": "Pikachu",
            "type": "Electric"
        }
    """

    # Numeric identifier (duplicates are allowed)
    id: int = Field(
        ...,
        description="Numeric pokemon identifier",
        examples=[1],
    )

    name: str | None = Field(
        default=None,
        description="Pokemon name",
        examples=["Pikachu"],
    )

    type: str | None = Field(
        default=None,
        description="Elemental type of the pokemon",
        examples=["Electric"],
    )


class PokemonUpdate(BaseModel):
    """
    Schema for updating a pokemon.

    Name and type are copied onto the stored record, a missing one as null.
    An id in the body is accepted but ignored; the id in the URL decides
    which record changes.

    Example:
        {
            "name": "Raichu",
            "type": "Electric"
        }
    """

    id: int | None = Field(
        default=None,
        description="Ignored; the path identifier is used instead",
    )

    name: str | None = Field(
        default=None,
        description="New pokemon name",
        examples=["Raichu"],
    )

    type: str | None = Field(
        default=None,
        description="New elemental type",
        examples=["Electric"],
    )


# Bulbasaur shares id 3 with Squirtle
DEFAULT_POKEMONS: tuple[Pokemon, ...] = (
    Pokemon(id=1, name="Pikachu", type="Electric"),
    Pokemon(id=2, name="Charmander", type="Fire"),
    Pokemon(id=3, name="Squirtle", type="Water"),
    Pokemon(id=3, name="Bulbasaur", type="Grass"),
)
