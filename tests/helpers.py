from __future__ import annotations

import asyncio
from typing import Iterable, List, Sequence

from memoryboard.events.bus import BoardEvents
from memoryboard.factories.tile_factory import BaseTileFactory
from memoryboard.systems.board import Board


def run(coro):
    """Drive a board coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)


class LabelTileFactory(BaseTileFactory):
    """Returns the layout label itself as the tile; fails on ``fail_on`` labels."""

    def __init__(self, fail_on: Iterable[str] = ()):
        self.fail_on = set(fail_on)
        self.requested: List[str] = []

    async def request(self, tile_type: str):
        self.requested.append(tile_type)
        if tile_type in self.fail_on:
            raise KeyError(f"No tile for '{tile_type}'")
        return tile_type


class EventRecorder:
    """Subscribes to every board event type and keeps them in arrival order."""

    def __init__(self, board: Board, types: Sequence[str] = BoardEvents.ALL):
        self.events = []
        for event_type in types:
            board.on(event_type, self.events.append)

    @property
    def types(self) -> List[str]:
        return [event.type for event in self.events]

    def of_type(self, event_type: str):
        return [event for event in self.events if event.type == event_type]

    def clear(self) -> None:
        self.events.clear()


def numbered_layout(columns: int, rows: int) -> List[List[str]]:
    """Layout whose labels are the cell indices, e.g. '5' for column 1 row 1 on a 4-wide board."""
    return [[str(column + row * columns) for column in range(columns)] for row in range(rows)]


def find_cells(board: Board, type_name: str) -> List[tuple[int, int]]:
    cells = []
    for row in range(board.rows):
        for column in range(board.columns):
            tile = board.tile_at(column, row)
            if tile is not None and tile.type_name == type_name:
                cells.append((column, row))
    return cells
