"""Controller wiring a Board into a playable round.

Starting a round sets the board up and shuffles it. A mismatch clears the
selection straight from the listener, so the ``deselect`` broadcast nests
inside the ``mismatch`` one. Matched cells keep their tiles and are ignored
by ``select`` from then on.

Cells are tracked by coordinates, never by tile identity: a factory may hand
the same tile object to several cells.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Set, Tuple

from memoryboard.components.tile import TilePair
from memoryboard.constants import SHUFFLE_ITERATIONS
from memoryboard.events.board_events import BoardMatchEvent, BoardSelectionEvent
from memoryboard.events.bus import (
    EVENT_DESELECT,
    EVENT_MATCH,
    EVENT_MISMATCH,
    EVENT_SELECT_FIRST,
    EVENT_SELECT_SECOND,
)
from memoryboard.factories.tile_factory import BaseTileFactory
from memoryboard.systems.board import Board

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class GameFlowSystem:
    def __init__(
        self,
        board: Board,
        tile_factory: BaseTileFactory,
        *,
        shuffle_iterations: int = SHUFFLE_ITERATIONS,
    ):
        self.board = board
        self.tile_factory = tile_factory
        self.shuffle_iterations = shuffle_iterations
        self.matched_pairs: List[TilePair] = []
        self.matched_cells: Set[Cell] = set()
        self._first_cell: Optional[Cell] = None
        self._second_cell: Optional[Cell] = None
        board.on(EVENT_SELECT_FIRST, self.on_select_first)
        board.on(EVENT_SELECT_SECOND, self.on_select_second)
        board.on(EVENT_DESELECT, self.on_deselect)
        board.on(EVENT_MATCH, self.on_match)
        board.on(EVENT_MISMATCH, self.on_mismatch)

    async def start(self, layout: Sequence[Sequence[str]]) -> None:
        self.matched_pairs.clear()
        self.matched_cells.clear()
        if self.board.first_selection is not None:
            self.board.deselect()
        await self.board.setup(self.tile_factory, layout)
        await self.board.shuffle(self.shuffle_iterations)
        logger.debug("Round started on a %dx%d board", self.board.columns, self.board.rows)

    def select(self, column: int, row: int) -> bool:
        cell = (column, row)
        self.board.tile_at(column, row)  # bounds check
        if self.is_matched(cell):
            return False
        # The board accepts self-pairs; a round does not.
        if cell == self._first_cell and self._second_cell is None:
            return False
        self.board.select(column, row)
        return True

    def is_matched(self, cell: Cell) -> bool:
        return cell in self.matched_cells

    @property
    def is_complete(self) -> bool:
        return len(self.matched_cells) == self.board.columns * self.board.rows

    def on_select_first(self, event: BoardSelectionEvent) -> None:
        self._first_cell = (event.column, event.row)
        self._second_cell = None

    def on_select_second(self, event: BoardSelectionEvent) -> None:
        self._second_cell = (event.column, event.row)

    def on_deselect(self, event: BoardSelectionEvent) -> None:
        self._first_cell = None
        self._second_cell = None

    def on_match(self, event: BoardMatchEvent) -> None:
        if self._first_cell is None or self._first_cell == self._second_cell:
            return
        if {self._first_cell, self._second_cell} <= self.matched_cells:
            return
        self.matched_pairs.append(event.pair)
        self.matched_cells.update((self._first_cell, self._second_cell))
        if self.is_complete:
            logger.debug("All %d pairs matched", len(self.matched_pairs))

    def on_mismatch(self, event: BoardMatchEvent) -> None:
        self.board.deselect()
