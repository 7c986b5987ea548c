"""Interactive Pokédex: browse Pokémon by type and add new ones."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from termcolor import colored

from .gen1 import gen1_pokedex
from .pokemon import Pokemon

_TYPE_COLORS = {
    "feu": "red",
    "eau": "blue",
    "plante": "green",
    "électrique": "yellow",
    "dragon": "magenta",
    "fée": "magenta",
    "combat": "light_cyan",
    "glace": "white",
    "insecte": "light_green",
    "poison": "light_red",
    "roche": "light_yellow",
    "psy": "light_blue",
    "spectre": "light_magenta",
    "sol": "dark_grey",
}
_DEFAULT_COLOR = "light_grey"

_MENU = (
    "\n1 : Afficher le pokedex  2: Ajouter un pokemon  "
    "3: Réinitialisé le pokedex  4: Quitter le programme\n\nVotre choix :"
)
_READ_ERROR = "Erreur de lecture"
_CHOICE_RE = re.compile(r"\+?[0-9]+")


def _paint(text: str, color: str, attrs: list[str], enabled: bool) -> str:
    if not enabled:
        return text
    return colored(text, color, attrs=attrs, force_color=True)


class Pokedex:
    """Pokémon entries grouped by type; identical entries are kept once."""

    def __init__(self) -> None:
        self._by_type: dict[str, set[str]] = {}

    def add(self, p_type: str, nom: str, p_id: int) -> None:
        """Record a Pokémon under its type."""
        self._by_type.setdefault(p_type, set()).add(f"{nom} (ID: {p_id})")

    def add_pokemon(self, pokemon: Pokemon) -> None:
        """Record a Pokémon record."""
        self.add(pokemon.p_type, pokemon.nom, pokemon.p_id)

    def add_many(self, pokemons: Iterable[Pokemon]) -> None:
        """Record every Pokémon of an iterable."""
        for pokemon in pokemons:
            self.add_pokemon(pokemon)

    def total(self) -> int:
        """Number of distinct entries across all types."""
        return sum(len(entries) for entries in self._by_type.values())

    def types(self) -> list[str]:
        """The known types, sorted."""
        return sorted(self._by_type)

    def entries(self, p_type: str) -> list[str]:
        """The sorted entries of a type; empty if the type is unknown."""
        return sorted(self._by_type.get(p_type, ()))

    def format_by_type(self, color: bool = False) -> str:
        """Render the Pokédex grouped by type, each block ending in a blank line."""
        blocks = []
        for p_type in self.types():
            header = _paint(
                p_type, _TYPE_COLORS.get(p_type, _DEFAULT_COLOR), ["bold"], color
            )
            lines = [header, *(f"  - {entry}" for entry in self.entries(p_type)), ""]
            blocks.append("\n".join(lines) + "\n")
        return "".join(blocks)


def init_pokedex(out: TextIO | None = None) -> Pokedex:
    """Build a Pokédex holding the first generation, reporting progress to out."""
    out = out if out is not None else sys.stdout
    print("initialisation du pokedex...", file=out)
    dex = Pokedex()
    dex.add_many(gen1_pokedex())
    print(
        f"Pokedex initialisé avec {dex.total()} Pokémon de la gen 1 !", file=out
    )
    return dex


def _read_line(lines: Iterator[str]) -> str:
    try:
        line = next(lines)
    except StopIteration:
        raise EOFError(_READ_ERROR) from None
    return line.rstrip("\r\n")


def add_pokemon_from_input(
    dex: Pokedex, lines: Iterator[str], out: TextIO | None = None
) -> None:
    """Ask for a name and a type, then add the Pokémon with the next free number."""
    out = out if out is not None else sys.stdout
    lines = iter(lines)
    print("Entrez le nom du Pokémon :", file=out)
    nom = _read_line(lines).strip()
    print("Entrez le type du Pokémon :", file=out)
    p_type = _read_line(lines).strip().lower()
    dex.add(p_type, nom, dex.total() + 1)


def welcome_message(color: bool = False) -> str:
    """The greeting shown when the program starts."""
    title = _paint(
        "Bienvenue dans le Pokedex !", "light_green", ["bold", "underline"], color
    )
    return "\n".join(
        [
            title,
            "Ce programme vous permet de gérer un Pokedex de la première génération.",
            "Vous pouvez afficher les Pokémon par ID ou par type, "
            "et ajouter de nouveaux Pokémon.",
        ]
    )


def _parse_choice(text: str) -> int | None:
    text = text.strip()
    if not _CHOICE_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value <= 255 else None


def run(
    lines: Iterable[str], out: TextIO | None = None, color: bool = False
) -> None:
    """Run the menu loop, reading answers from lines until the user quits."""
    out = out if out is not None else sys.stdout
    lines = iter(lines)
    print(welcome_message(color), file=out)
    dex = init_pokedex(out)

    while True:
        print(_MENU, file=out)
        choice = _parse_choice(_read_line(lines))
        if choice == 1:
            print("\nAffichage du pokedex par type :", file=out)
            out.write(dex.format_by_type(color))
        elif choice == 2:
            add_pokemon_from_input(dex, lines, out)
            print("\nPokémon ajouté avec succès !", file=out)
        elif choice == 3:
            dex = init_pokedex(out)
            print("\nPokedex réinitialisé avec succès !", file=out)
        elif choice == 4:
            break
        else:
            print("\nChoix invalide, veuillez réessayer.", file=out)

    print("Fermeture du pokedex...", file=out)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive Pokédex on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Pokédex interactif de la première génération."
    )
    parser.add_argument(
        "--no-color", action="store_true", help="désactiver les couleurs"
    )
    args = parser.parse_args(argv)
    color = not args.no_color and sys.stdout.isatty()
    try:
        run(sys.stdin, sys.stdout, color)
    except EOFError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())