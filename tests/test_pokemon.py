import dataclasses

import pytest

from pokedex_fr.pokemon import Pokemon


def test_fields_follow_constructor_order():
    pokemon = Pokemon("Pikachu", "électrique", 25)
    assert pokemon.nom == "Pikachu"
    assert pokemon.p_type == "électrique"
    assert pokemon.p_id == 25


def test_keyword_construction_matches_positional():
    assert Pokemon(nom="Abo", p_type="poison", p_id=23) == Pokemon("Abo", "poison", 23)


def test_different_ids_are_different():
    assert not Pokemon("Abo", "poison", 23) == Pokemon("Abo", "poison", 24)


def test_record_is_immutable():
    pokemon = Pokemon("Abo", "poison", 23)
    with pytest.raises(dataclasses.FrozenInstanceError):
        pokemon.nom = "Arbok"
    assert pokemon.nom == "Abo"
    assert pokemon == Pokemon("Abo", "poison", 23)