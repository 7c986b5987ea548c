# pokedex-fr

A small interactive Pokédex for the terminal, with its interface in French. When it
starts it loads the first thirty Pokémon of generation 1, from Bulbizarre (ID 1) to
Nidorina (ID 30). You can then list them grouped by type, add your own, or reset the
Pokédex.

## Installation

```
pip install .
```

## Usage

Start the program with:

```
pokedex-fr
```

Add `--no-color` to turn colours off. Colours are also left out when standard output
is not a terminal.

After a welcome message the Pokédex is loaded and a menu appears:

```
1 : Afficher le pokedex  2: Ajouter un pokemon  3: Réinitialisé le pokedex  4: Quitter le programme
```

- **1** lists the types in alphabetical order. Each type is shown in bold in its own
  colour, and the Pokémon of that type follow in sorted order, written as
  `  - Nom (ID: n)`.
- **2** asks for a name and then a type. Both are trimmed and the type is stored in
  lower case. The new Pokémon gets the current total plus one as its ID. An entry
  identical to one already present is kept only once.
- **3** throws away your changes and reloads the generation 1 list.
- **4** quits, printing `Fermeture du pokedex...`.

Any other answer prints `Choix invalide, veuillez réessayer.` and shows the menu again.
If standard input ends before you quit, the program prints `Erreur de lecture` on
standard error and exits with status 1.

## Using it as a library

```python
from pokedex_fr.cli import Pokedex
from pokedex_fr.gen1 import gen1_pokedex

dex = Pokedex()
dex.add_many(gen1_pokedex())
print(dex.total())          # 30
print(dex.types())          # sorted list of types
print(dex.entries("feu"))   # sorted entries of one type
print(dex.format_by_type(color=False))
```

- `pokedex_fr.pokemon.Pokemon` is a frozen dataclass holding one Pokémon's name
  (`nom`), type (`p_type`) and ID (`p_id`).
- `pokedex_fr.gen1.gen1_pokedex()` returns the generation 1 list as `Pokemon` records.
- `Pokedex.add(p_type, nom, p_id)` and `Pokedex.add_pokemon(pokemon)` add one entry.
- `pokedex_fr.cli.run(lines, out, color)` runs the whole menu loop, reading answers
  from any iterable of lines and writing to any text stream, which makes it easy to
  script or test.

## What it does not do

- The Pokédex lives in memory only: Pokémon you add are lost when the program quits
  or when you reset it.
- The welcome message mentions listing by ID, but the only listing offered is the
  one grouped by type.
- Only the first thirty Pokémon of generation 1 are loaded.

## Running the tests

```
pip install .[test]
pytest
```