# =============================================================================
# core/services/pokemon_service.py - Pokemon Business Logic
# =============================================================================
# Handles pokemon CRUD operations against an in-memory list.
# Separates HTTP concerns from storage logic.
#
# Records are matched by a linear scan on id. Ids are not unique, so:
# - lookups and updates act on the FIRST match
# - deletes remove EVERY match
# =============================================================================

import json
import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from app.exceptions import SeedDataError
from core.models.pokemon import DEFAULT_POKEMONS, Pokemon, PokemonUpdate

logger = logging.getLogger(__name__)

_POKEMON_LIST = TypeAdapter(list[Pokemon])


class PokemonService:
    """
    Service for pokemon management operations.

    Owns the in-memory collection. Every instance starts from its own copy
    of the seed records so instances never share state.
    """

    def __init__(self, pokemons: list[Pokemon] | None = None):
        seed = DEFAULT_POKEMONS if pokemons is None else pokemons
        self._pokemons: list[Pokemon] = [p.model_copy() for p in seed]

    def get_all_pokemons(self) -> list[Pokemon]:
        """Return every stored pokemon in insertion order."""
        return list(self._pokemons)

    def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon | None:
        """
        Get the first pokemon with the given id.

        Args:
            pokemon_id: The pokemon id to look up

        Returns:
            The matching pokemon, or None when nothing matches
        """
        pokemon = next((p for p in self._pokemons if p.id == pokemon_id), None)

        if pokemon is None:
            logger.debug(f"No pokemon with id: {pokemon_id}")

        return pokemon

    def create_pokemon(self, pokemon: Pokemon) -> Pokemon:
        """
        Append a pokemon to the collection.

        No uniqueness check is made on the id.
        """
        stored = pokemon.model_copy()
        self._pokemons.append(stored)
        logger.info(f"Created pokemon: {stored.id} ({stored.name})")
        return stored

    def update_pokemon(self, pokemon_id: int, pokemon: PokemonUpdate | Pokemon) -> Pokemon | None:
        """
        Update name and type of the first pokemon with the given id.

        Args:
            pokemon_id: Id of the pokemon to update
            pokemon: Payload holding the new name and type (its id is ignored)

        Returns:
            The updated pokemon, or None if no pokemon matched (no-op)
        """
        existing = self.get_pokemon_by_id(pokemon_id)

        if existing is None:
            return None

        existing.name = pokemon.name
        existing.type = pokemon.type
        logger.info(f"Updated pokemon: {pokemon_id}")
        return existing

    def delete_pokemon(self, pokemon_id: int) -> int:
        """
        Remove every pokemon with the given id.

        Returns:
            Number of pokemons removed (0 when nothing matched)
        """
        before = len(self._pokemons)
        self._pokemons = [p for p in self._pokemons if p.id != pokemon_id]
        removed = before - len(self._pokemons)

        if removed:
            logger.info(f"Deleted {removed} pokemon(s) with id: {pokemon_id}")
        else:
            logger.debug(f"Nothing to delete for id: {pokemon_id}")

        return removed

    def count(self) -> int:
        """Number of stored pokemons."""
        return len(self._pokemons)


def load_seed_pokemons(path: str | Path) -> list[Pokemon]:
    """
    Load seed pokemons from a JSON file.

    The file holds either a list of records or an object with a
    "pokemons" list:

        [{"id": 1, "name": "Pikachu", "type": "Electric"}]
        {"pokemons": [{"id": 1, "name": "Pikachu", "type": "Electric"}]}

    Raises:
        SeedDataError: If the file is missing, not JSON, or has bad records
    """
    seed_path = Path(path)

    if not seed_path.exists():
        raise SeedDataError(str(seed_path), "file does not exist")

    try:
        with open(seed_path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError
        raise SeedDataError(str(seed_path), str(e)) from e

    if isinstance(data, dict):
        data = data.get("pokemons")

    try:
        pokemons = _POKEMON_LIST.validate_python(data)
    except ValidationError as e:
        raise SeedDataError(str(seed_path), f"invalid pokemon records: {e.error_count()} error(s)") from e

    logger.info(f"Loaded {len(pokemons)} seed pokemon(s) from {seed_path}")
    return pokemons
