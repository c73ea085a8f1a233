"""Grid-bucketed spatial index for fast entity lookup by cell."""

from __future__ import annotations

from collections.abc import Hashable


class SpatialIndex:
    """Maps (x, y) grid cells to the entities in them, on a single z-level."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = width
        self.height = height
        self._grid: list[list[Hashable]] = [[] for _ in range(width * height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self) -> None:
        for cell in self._grid:
            cell.clear()

    def insert(self, entity: Hashable, x: int, y: int) -> None:
        """Add an entity to a cell; positions outside the grid are ignored."""
        if self._in_bounds(x, y):
            self._grid[y * self.width + x].append(entity)

    def get_entities_at(self, x: int, y: int) -> list[Hashable]:
        """Entities in one cell, in insertion order; empty outside the grid."""
        if not self._in_bounds(x, y):
            return []
        return list(self._grid[y * self.width + x])

    def query_range(
        self, min_x: int, min_y: int, max_x: int, max_y: int
    ) -> list[Hashable]:
        """Entities in an inclusive cell rectangle, clamped to the grid, row by row."""
        min_x = max(min_x, 0)
        min_y = max(min_y, 0)
        max_x = min(max_x, self.width - 1)
        max_y = min(max_y, self.height - 1)
        return [
            entity
            for y in range(min_y, max_y + 1)
            for x in range(min_x, max_x + 1)
            for entity in self._grid[y * self.width + x]
        ]