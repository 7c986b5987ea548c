"""Interactive terminal Pokédex of first-generation Pokémon, grouped by type."""

__version__ = "0.0.2"