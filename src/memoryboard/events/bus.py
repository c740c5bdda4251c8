from typing import Any, Callable, Dict, List

from blinker import Signal

Listener = Callable[[Any], None]


class EventBroadcaster:
    """Ordered event broadcaster built on blinker Signal objects.

    Each event type gets one Signal. Listeners registered through ``on`` are
    kept in an ordered list per type and called in registration order, once
    per registration. Exceptions raised by a listener are not caught: they
    propagate out of ``broadcast`` and the remaining listeners are skipped.
    """

    def __init__(self):
        self._signals: Dict[str, Signal] = {}
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event_type: str, listener: Listener) -> None:
        listeners = self._listeners.get(event_type)
        if listeners is None:
            listeners = self._listeners[event_type] = []
            # weak=False keeps the dispatcher alive for the broadcaster's lifetime.
            self.signal(event_type).connect(self._deliver, weak=False)
        listeners.append(listener)

    def signal(self, event_type: str) -> Signal:
        """Signal carrying ``event_type``; raw receivers get ``(sender, event=...)``."""
        return self._signals.setdefault(event_type, Signal(event_type))

    def listeners(self, event_type: str) -> List[Listener]:
        return list(self._listeners.get(event_type, ()))

    def broadcast(self, event) -> None:
        sig = self._signals.get(event.type)
        if sig:
            sig.send(self, event=event)

    def _deliver(self, sender, event) -> None:
        # Snapshot so listeners added mid-broadcast wait for the next one.
        for listener in list(self._listeners.get(event.type, ())):
            listener(event)


# ============================================================================
# BOARD EVENTS
# ============================================================================
EVENT_SELECT_FIRST = "select_first"    # payload: column, row, selection
EVENT_SELECT_SECOND = "select_second"  # payload: column, row, selection
EVENT_DESELECT = "deselect"            # payload: none
EVENT_MATCH = "match"                  # payload: pair=TilePair, match=True
EVENT_MISMATCH = "mismatch"            # payload: pair=TilePair, match=False
EVENT_PLACE_TILE = "place"             # payload: column, row, tile, tile_type
EVENT_SETUP = "setup"                  # payload: none
EVENT_SHUFFLE = "shuffle"              # payload: before=tuple, after=tuple
EVENT_SHUFFLED = "shuffled"            # payload: none


class BoardEvents:
    """Namespace mirroring the EVENT_* identifiers."""
    SELECT_FIRST = EVENT_SELECT_FIRST
    SELECT_SECOND = EVENT_SELECT_SECOND
    DESELECT = EVENT_DESELECT
    MATCH = EVENT_MATCH
    MISMATCH = EVENT_MISMATCH
    PLACE_TILE = EVENT_PLACE_TILE
    SETUP = EVENT_SETUP
    SHUFFLE = EVENT_SHUFFLE
    SHUFFLED = EVENT_SHUFFLED

    ALL = (
        SELECT_FIRST,
        SELECT_SECOND,
        DESELECT,
        MATCH,
        MISMATCH,
        PLACE_TILE,
        SETUP,
        SHUFFLE,
        SHUFFLED,
    )
