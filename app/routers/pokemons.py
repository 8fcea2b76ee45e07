# =============================================================================
# app/routers/pokemons.py - Pokemon CRUD Endpoints
# =============================================================================
# Thin HTTP layer over PokemonService. No authentication.
#
# Missing ids are not errors:
# - GET /pokemons/{id} returns null
# - PUT and DELETE on an unknown id do nothing
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from app.dependencies import PokemonServiceDep
from core.models.pokemon import Pokemon, PokemonUpdate

router = APIRouter()

PokemonId = Annotated[int, Path(description="Pokemon id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=list[Pokemon])
async def get_all_pokemons(service: PokemonServiceDep):
    """
    List all pokemons.

    Returns the whole in-memory collection in insertion order.
    """
    return service.get_all_pokemons()


@router.get("/{pokemon_id}", response_model=Pokemon | None)
async def get_pokemon_by_id(pokemon_id: PokemonId, service: PokemonServiceDep):
    """
    Get a pokemon by id.

    Returns the first pokemon with this id, or null if there is none.
    """
    return service.get_pokemon_by_id(pokemon_id)


@router.post("", response_model=None)
async def create_pokemon(pokemon: Pokemon, service: PokemonServiceDep):
    """
    Create a pokemon.

    Appends the pokemon to the collection. Ids are not checked for uniqueness.
    """
    service.create_pokemon(pokemon)


@router.put("/{pokemon_id}", response_model=None)
async def update_pokemon(
    pokemon_id: PokemonId,
    pokemon: PokemonUpdate,
    service: PokemonServiceDep,
):
    """
    Update a pokemon.

    Copies name and type onto the first pokemon with this id.
    Does nothing if no pokemon has this id.
    """
    service.update_pokemon(pokemon_id, pokemon)


@router.delete("/{pokemon_id}", response_model=None)
async def delete_pokemon(pokemon_id: PokemonId, service: PokemonServiceDep):
    """
    Delete pokemons.

    Removes every pokemon with this id.
    """
    service.delete_pokemon(pokemon_id)
