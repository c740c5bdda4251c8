from memoryboard.constants import MAX_MULTIPLIER, POINTS_PER_MATCH
from memoryboard.events.board_events import BoardMatchEvent
from memoryboard.events.bus import EventBroadcaster, EVENT_MATCH, EVENT_MISMATCH


class ScoreSystem:
    """Tracks pairs, mistakes and a streak multiplier from match events."""

    def __init__(
        self,
        event_bus: EventBroadcaster,
        points_per_match: int = POINTS_PER_MATCH,
        max_multiplier: int = MAX_MULTIPLIER,
    ):
        self.event_bus = event_bus
        self.points_per_match = points_per_match
        self.max_multiplier = max(1, max_multiplier)
        self.reset()
        event_bus.on(EVENT_MATCH, self.on_match)
        event_bus.on(EVENT_MISMATCH, self.on_mismatch)

    def reset(self) -> None:
        self.score = 0
        self.multiplier = 1
        self.pairs = 0
        self.mistakes = 0

    def on_match(self, event: BoardMatchEvent) -> None:
        self.pairs += 1
        self.score += self.points_per_match * self.multiplier
        self.multiplier = min(self.multiplier + 1, self.max_multiplier)

    def on_mismatch(self, event: BoardMatchEvent) -> None:
        self.mistakes += 1
        self.multiplier = 1
