from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True, slots=True)
class TilePair:
    """The two selected tiles handed to a factory for match judgement."""
    first: Any
    second: Any


@dataclass(slots=True, eq=False)
class Fruit:
    """Example tile produced by ExampleTileFactory.

    Compares by identity: two Apples are still two distinct tiles. Matching
    by kind goes through ``type_name``.
    """
    type_name: str
    color: Tuple[int, int, int]
