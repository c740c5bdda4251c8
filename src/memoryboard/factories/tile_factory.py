from __future__ import annotations

from typing import Any

from memoryboard.components.tile import TilePair


class BaseTileFactory:
    """Creates tiles for layout labels and judges whether two tiles match.

    ``request`` must be overridden. The board schedules one request per cell
    without waiting for earlier ones, so implementations have to tolerate
    overlapping calls.
    """

    async def request(self, tile_type: str) -> Any:
        raise NotImplementedError(
            f"Unable to request type {tile_type}. request must be overridden by subclass of BaseTileFactory"
        )

    def match_tiles(self, pair: TilePair) -> bool:
        """Must not mutate the tiles."""
        return pair.first == pair.second
