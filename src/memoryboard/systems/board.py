"""Board state machine for a pairs ("memory") game.

The board owns the tile grid and the two-slot selection. Tiles come from a
tile factory during ``setup``; the board never looks inside them. Every state
change is announced through the board's EventBroadcaster:

    Empty --setup--> Ready --select--> OneSelected --select--> TwoSelected
    TwoSelected --deselect (or a third select)--> Ready

Listeners run synchronously inside ``broadcast``. A listener that calls back
into the board (for example ``deselect`` on a mismatch) runs its nested
broadcast to completion before the outer one continues.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any, List, Optional

from memoryboard.components.tile import TilePair
from memoryboard.constants import SHUFFLE_ITERATIONS
from memoryboard.events.board_events import (
    BoardChangeEvent,
    BoardMatchEvent,
    BoardPlaceEvent,
    BoardSelectionEvent,
)
from memoryboard.events.bus import (
    EventBroadcaster,
    Listener,
    EVENT_DESELECT,
    EVENT_MATCH,
    EVENT_MISMATCH,
    EVENT_PLACE_TILE,
    EVENT_SELECT_FIRST,
    EVENT_SELECT_SECOND,
    EVENT_SETUP,
    EVENT_SHUFFLE,
    EVENT_SHUFFLED,
)
from memoryboard.factories.tile_factory import BaseTileFactory
from memoryboard.utils.random_source import XorShift128, random_range_integer, swap_elements

logger = logging.getLogger(__name__)


def _is_row_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class Board:
    def __init__(
        self,
        columns: int,
        rows: int,
        *,
        event_bus: EventBroadcaster | None = None,
        rng: XorShift128 | None = None,
    ):
        if columns <= 0 or rows <= 0:
            raise ValueError(f"Cannot create a Board with {columns} columns and {rows} rows. Dimensions must be positive")
        if (columns * rows) % 2 != 0:
            raise ValueError(
                f"Cannot create a Board with {columns} columns and {rows} rows. Not divisible by equal pairs"
            )
        self.event_bus = event_bus or EventBroadcaster()
        self.rng = rng or XorShift128()
        self._columns = columns
        self._rows = rows
        self._tiles: List[Any] = [None] * (columns * rows)
        self._first: Any = None
        self._second: Any = None
        self._tile_factory: Optional[BaseTileFactory] = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def on(self, event_type: str, listener: Listener) -> None:
        self.event_bus.on(event_type, listener)

    def broadcast(self, event) -> None:
        self.event_bus.broadcast(event)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def tiles(self) -> List[Any]:
        return list(self._tiles)

    @property
    def first_selection(self) -> Any:
        return self._first

    @property
    def second_selection(self) -> Any:
        return self._second

    @property
    def tile_factory(self) -> Optional[BaseTileFactory]:
        return self._tile_factory

    def tile_at(self, column: int, row: int) -> Any:
        return self._tiles[self._index(column, row)]

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def deselect(self) -> None:
        self._first = None
        self._second = None
        self.broadcast(BoardSelectionEvent(type=EVENT_DESELECT))

    def select(self, column: int, row: int) -> None:
        tile = self.tile_at(column, row)
        if tile is None:
            raise ValueError(f"No tile at column {column}, row {row} to select")
        if self._first is not None and self._second is not None:
            self.deselect()
        if self._first is not None:
            self._second = tile
            self.broadcast(BoardSelectionEvent(type=EVENT_SELECT_SECOND, column=column, row=row, selection=tile))
            self._evaluate_selection()
        else:
            self._first = tile
            self.broadcast(BoardSelectionEvent(type=EVENT_SELECT_FIRST, column=column, row=row, selection=tile))

    def _evaluate_selection(self) -> None:
        pair = TilePair(first=self._first, second=self._second)
        match = bool(self._tile_factory.match_tiles(pair))
        event_type = EVENT_MATCH if match else EVENT_MISMATCH
        self.broadcast(BoardMatchEvent(type=event_type, pair=pair, match=match))

    # ------------------------------------------------------------------
    # Shuffle
    # ------------------------------------------------------------------
    async def shuffle(self, iterations: int = SHUFFLE_ITERATIONS) -> None:
        """Run ``iterations`` Fisher-Yates passes, one ``shuffle`` event each."""
        if iterations < 0:
            raise ValueError(f"Cannot shuffle a negative number of iterations ({iterations})")
        for _ in range(iterations):
            before = tuple(self._tiles)
            after = self._shuffle_tiles()
            self.broadcast(BoardChangeEvent(type=EVENT_SHUFFLE, before=before, after=after))
        logger.debug("Board shuffled %d time(s)", iterations)
        self.broadcast(BoardChangeEvent(type=EVENT_SHUFFLED))

    def _shuffle_tiles(self) -> tuple:
        position = len(self._tiles)
        while position > 1:
            position -= 1
            source = random_range_integer(self.rng, 0, position)
            swap_elements(self._tiles, position, source)
        return tuple(self._tiles)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    async def setup(self, tile_factory: BaseTileFactory, layout: Sequence[Sequence[str]]) -> None:
        """Fill every cell from ``layout`` using ``tile_factory``.

        All requests are scheduled before any is awaited. Tiles are placed only
        once every request has resolved, in layout order, so a failing request
        leaves the board exactly as it was. The ``setup`` event follows the
        last ``place`` event.
        """
        if not isinstance(tile_factory, BaseTileFactory):
            raise TypeError(f"Board tile_factory {tile_factory!r} is not a TileFactory.")
        self._validate_layout(layout)

        cells = []
        pending: List[asyncio.Future] = []
        try:
            for row, row_layout in enumerate(layout):
                for column, tile_type in enumerate(row_layout):
                    cells.append((column, row, tile_type))
                    pending.append(asyncio.ensure_future(tile_factory.request(tile_type)))
            tiles = await asyncio.gather(*pending)
        except BaseException:
            for future in pending:
                future.cancel()
            raise

        for (column, row, tile_type), tile in zip(cells, tiles):
            self._place_tile(column, row, tile, tile_type)
        self._tile_factory = tile_factory
        logger.debug("Board setup placed %d tiles", len(cells))
        self.broadcast(BoardChangeEvent(type=EVENT_SETUP))

    def _validate_layout(self, layout) -> None:
        if not _is_row_sequence(layout):
            raise TypeError(
                f"Board layout is not a sequence. {type(layout).__name__} is not a valid type for the layout parameter of Board.setup"
            )
        problems: List[str] = []
        if len(layout) != self._rows:
            problems.append(
                f"Board layout does not have correct number of rows. Found {len(layout)} of {self._rows} rows in layout."
            )
        for row, row_layout in enumerate(layout):
            if not _is_row_sequence(row_layout):
                # Keep the dimension problems found so far in the message.
                raise TypeError(
                    " ".join([f"Board layout row {row} is not a sequence ({type(row_layout).__name__})."] + problems)
                )
            if len(row_layout) != self._columns:
                problems.append(
                    f"Board layout does not have correct number of columns in row {row}. "
                    f"Found {len(row_layout)} of {self._columns} columns in layout."
                )
        if problems:
            raise ValueError(" ".join(problems))

    def _place_tile(self, column: int, row: int, tile: Any, tile_type: str) -> None:
        self._tiles[self._index(column, row)] = tile
        self.broadcast(BoardPlaceEvent(type=EVENT_PLACE_TILE, column=column, row=row, tile=tile, tile_type=tile_type))

    def _index(self, column: int, row: int) -> int:
        if not (0 <= column < self._columns and 0 <= row < self._rows):
            raise IndexError(
                f"Cell ({column}, {row}) is outside the {self._columns}x{self._rows} board"
            )
        return column + row * self._columns
