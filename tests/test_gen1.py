from pokedex_fr.gen1 import gen1_pokedex
from pokedex_fr.pokemon import Pokemon


def test_ids_are_consecutive_from_one():
    dex = gen1_pokedex()
    assert [p.p_id for p in dex] == list(range(1, len(dex) + 1))


def test_has_thirty_pokemon():
    assert len(gen1_pokedex()) == 30


def test_first_and_last_entries():
    dex = gen1_pokedex()
    assert dex[0] == Pokemon("Bulbizarre", "plante", 1)
    assert dex[-1] == Pokemon("Nidorina", "poison", 30)


def test_pikachu_is_electric():
    by_name = {p.nom: p for p in gen1_pokedex()}
    assert by_name["Pikachu"] == Pokemon("Pikachu", "électrique", 25)
    assert by_name["Salamèche"].p_type == "feu"


def test_names_are_unique():
    names = [p.nom for p in gen1_pokedex()]
    assert len(set(names)) == len(names)


def test_types_are_known():
    types = {p.p_type for p in gen1_pokedex()}
    assert types == {
        "plante", "feu", "eau", "insecte", "normal", "poison", "électrique", "sol"
    }


def test_each_call_returns_fresh_list():
    first = gen1_pokedex()
    first.clear()
    assert len(gen1_pokedex()) == 30