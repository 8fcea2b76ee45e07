# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the pokemon models to ensure:
# - Valid data is accepted and parsed correctly
# - Structurally invalid data raises ValidationError
# - The seed data matches the documented records
#
# Run with: poetry run pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import DEFAULT_POKEMONS, Pokemon, PokemonUpdate


# =============================================================================
# Pokemon Tests
# =============================================================================

class TestPokemon:
    """Tests for Pokemon model."""

    def test_valid_pokemon(self, sample_pokemon_dict):
        """Test creating a valid Pokemon."""
        pokemon = Pokemon(**sample_pokemon_dict)

        assert pokemon.id == 25
        assert pokemon.name == "Eevee"
        assert pokemon.type == "Normal"

    def test_numeric_string_id_is_coerced(self):
        """JSON clients may send the id as a string."""
        pokemon = Pokemon(id="4", name="Charmeleon", type="Fire")

        assert pokemon.id == 4

    def test_missing_name_is_null(self):
        pokemon = Pokemon(id=1, type="Electric")

        assert pokemon.name is None
        assert pokemon.type == "Electric"

    def test_missing_id_raises(self):
        with pytest.raises(ValidationError):
            Pokemon(name="Pikachu", type="Electric")

    def test_non_numeric_id_raises(self):
        with pytest.raises(ValidationError):
            Pokemon(id="pikachu", name="Pikachu", type="Electric")

    def test_empty_strings_are_allowed(self):
        """Only the shape is enforced, not the content."""
        pokemon = Pokemon(id=0, name="", type="")

        assert pokemon.name == ""

    def test_serializes_to_dict(self, sample_pokemon_dict):
        pokemon = Pokemon(**sample_pokemon_dict)

        assert pokemon.model_dump() == sample_pokemon_dict


# =============================================================================
# PokemonUpdate Tests
# =============================================================================

class TestPokemonUpdate:
    """Tests for PokemonUpdate model."""

    def test_id_is_optional(self):
        update = PokemonUpdate(name="Raichu", type="Electric")

        assert update.id is None
        assert update.name == "Raichu"

    def test_accepts_full_record(self, sample_pokemon_dict):
        """Clients that send the whole record are accepted."""
        update = PokemonUpdate(**sample_pokemon_dict)

        assert update.id == 25

    def test_missing_type_is_null(self):
        update = PokemonUpdate(name="Raichu")

        assert update.type is None

    def test_wrong_name_type_raises(self):
        with pytest.raises(ValidationError):
            PokemonUpdate(name=["Raichu"], type="Electric")


# =============================================================================
# Seed Data Tests
# =============================================================================

class TestDefaultPokemons:
    """Tests for the built-in seed records."""

    def test_four_records(self):
        assert len(DEFAULT_POKEMONS) == 4

    def test_seed_order(self):
        names = [p.name for p in DEFAULT_POKEMONS]

        assert names == ["Pikachu", "Charmander", "Squirtle", "Bulbasaur"]

    def test_seed_contains_duplicate_id(self):
        """Squirtle and Bulbasaur share id 3."""
        ids = [p.id for p in DEFAULT_POKEMONS]

        assert ids == [1, 2, 3, 3]
