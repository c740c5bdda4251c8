from types import SimpleNamespace

from memoryboard.events.bus import BoardEvents, EventBroadcaster
from memoryboard.factories.example import EXAMPLE_LAYOUT, ExampleTileFactory
from memoryboard.factories.tile_factory import BaseTileFactory
from memoryboard.systems.board import Board
from memoryboard.utils.random_source import XorShift128, random_range_integer, swap_elements

VERSION = '1.0.0'

utils = SimpleNamespace(
    random_range_integer=random_range_integer,
    swap_elements=swap_elements,
    XorShift128=XorShift128,
)

example = SimpleNamespace(
    ExampleTileFactory=ExampleTileFactory,
    example_layout=EXAMPLE_LAYOUT,
)

__all__ = [
    "VERSION",
    "BaseTileFactory",
    "Board",
    "BoardEvents",
    "EventBroadcaster",
    "example",
    "utils",
]
