"""The Pokémon record held by the Pokédex."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pokemon:
    """A Pokémon with its name, its type and its Pokédex number."""

    nom: str
    p_type: str
    p_id: int