"""Payload records broadcast by the board.

Every variant is a frozen dataclass whose ``type`` field is the discriminant
(one of the ``EVENT_*`` identifiers). A variant only accepts the types listed
in its ``TYPES`` tuple, so consumers can dispatch on ``event.type`` alone.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Optional, Tuple, Union

from memoryboard.components.tile import TilePair
from memoryboard.events.bus import (
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


def _check_type(event) -> None:
    if event.type not in event.TYPES:
        raise ValueError(
            f"{type(event).__name__} cannot carry event type '{event.type}'. Expected one of {event.TYPES}"
        )


def _describe(event) -> str:
    return f"BoardEvent [{event.type.upper()}]"


@dataclass(frozen=True, slots=True)
class BoardSelectionEvent:
    TYPES: ClassVar[Tuple[str, ...]] = (EVENT_SELECT_FIRST, EVENT_SELECT_SECOND, EVENT_DESELECT)

    type: str
    column: Optional[int] = None
    row: Optional[int] = None
    selection: Any = None

    def __post_init__(self) -> None:
        _check_type(self)

    __str__ = _describe


@dataclass(frozen=True, slots=True)
class BoardMatchEvent:
    TYPES: ClassVar[Tuple[str, ...]] = (EVENT_MATCH, EVENT_MISMATCH)

    type: str
    pair: TilePair
    match: bool = False

    def __post_init__(self) -> None:
        _check_type(self)

    __str__ = _describe


@dataclass(frozen=True, slots=True)
class BoardChangeEvent:
    """Setup and shuffle notifications; only ``shuffle`` carries snapshots."""
    TYPES: ClassVar[Tuple[str, ...]] = (EVENT_SETUP, EVENT_SHUFFLE, EVENT_SHUFFLED)

    type: str
    before: Optional[Tuple[Any, ...]] = None
    after: Optional[Tuple[Any, ...]] = None

    def __post_init__(self) -> None:
        _check_type(self)

    __str__ = _describe


@dataclass(frozen=True, slots=True)
class BoardPlaceEvent:
    TYPES: ClassVar[Tuple[str, ...]] = (EVENT_PLACE_TILE,)

    type: str
    column: int
    row: int
    tile: Any
    tile_type: str

    def __post_init__(self) -> None:
        _check_type(self)

    __str__ = _describe


BoardEvent = Union[BoardSelectionEvent, BoardMatchEvent, BoardChangeEvent, BoardPlaceEvent]
