from __future__ import annotations

from typing import Callable, Dict, List, Mapping, Tuple

from memoryboard.components.tile import Fruit, TilePair
from memoryboard.factories.tile_factory import BaseTileFactory

FRUIT_TYPES: Tuple[str, ...] = (
    'Apple', 'Orange', 'Lemon', 'Melon', 'Grapes', 'Peach', 'Banana', 'Plum',
)

DEFAULT_FRUIT_ASSETS: Dict[str, Tuple[int, int, int]] = {
    'Apple':  (200, 40, 40),
    'Orange': (240, 140, 30),
    'Lemon':  (245, 225, 60),
    'Melon':  (120, 200, 90),
    'Grapes': (110, 50, 140),
    'Peach':  (250, 180, 140),
    'Banana': (250, 230, 120),
    'Plum':   (90, 30, 90),
}

EXAMPLE_LAYOUT: List[List[str]] = [
    ['Apple', 'Orange', 'Lemon', 'Grapes'],
    ['Orange', 'Grapes', 'Melon', 'Apple'],
    ['Lemon', 'Peach', 'Plum', 'Banana'],
    ['Melon', 'Banana', 'Peach', 'Plum'],
]


class ExampleTileFactory(BaseTileFactory):
    """Builds Fruit tiles from a fixed asset bundle (label -> colour).

    Only the eight FRUIT_TYPES have builders; labels the bundle leaves out are
    rejected like any unknown label.
    """

    def __init__(self, assets: Mapping[str, Tuple[int, int, int]] | None = None):
        self._assets = dict(DEFAULT_FRUIT_ASSETS if assets is None else assets)
        self._builders: Dict[str, Callable[[], Fruit]] = {
            type_name: self._builder_for(type_name)
            for type_name in FRUIT_TYPES
            if type_name in self._assets
        }

    @property
    def tile_types(self) -> List[str]:
        return list(self._builders.keys())

    def _builder_for(self, type_name: str) -> Callable[[], Fruit]:
        color = self._assets[type_name]

        def build() -> Fruit:
            return Fruit(type_name=type_name, color=color)

        return build

    async def request(self, tile_type: str) -> Fruit:
        builder = self._builders.get(tile_type)
        if builder is None:
            raise KeyError(f"Unable to find a builder for '{tile_type}' in the TileFactory")
        return builder()

    def match_tiles(self, pair: TilePair) -> bool:
        return pair.first.type_name == pair.second.type_name
