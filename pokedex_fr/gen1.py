"""The first-generation Pokémon known to the Pokédex."""

from __future__ import annotations

from .pokemon import Pokemon

_GEN1 = (
    ("Bulbizarre", "plante"),
    ("Herbizarre", "plante"),
    ("Florizarre", "plante"),
    ("Salamèche", "feu"),
    ("Reptincel", "feu"),
    ("Dracaufeu", "feu"),
    ("Carapuce", "eau"),
    ("Carabaffe", "eau"),
    ("Tortank", "eau"),
    ("Chenipan", "insecte"),
    ("Chrysacier", "insecte"),
    ("Papilusion", "insecte"),
    ("Aspicot", "insecte"),
    ("Coconfort", "insecte"),
    ("Dardargnan", "insecte"),
    ("Roucool", "normal"),
    ("Roucoups", "normal"),
    ("Roucarnage", "normal"),
    ("Rattata", "normal"),
    ("Rattatac", "normal"),
    ("Piafabec", "normal"),
    ("Rapasdepic", "normal"),
    ("Abo", "poison"),
    ("Arbok", "poison"),
    ("Pikachu", "électrique"),
    ("Raichu", "électrique"),
    ("Sabelette", "sol"),
    ("Sablaireau", "sol"),
    ("Nidoran♀", "poison"),
    ("Nidorina", "poison"),
)


def gen1_pokedex() -> list[Pokemon]:
    """Return the first-generation Pokémon, numbered from 1 in Pokédex order."""
    return [
        Pokemon(nom, p_type, p_id)
        for p_id, (nom, p_type) in enumerate(_GEN1, start=1)
    ]