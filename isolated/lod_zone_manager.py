"""Temporal level-of-detail: time-slice physics updates across grid regions."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass
class LODConfig:
    """Grid size and region layout for temporal LOD."""

    nx: int = 200
    ny: int = 200
    num_regions: int = 4
    viewport_padding: int = 50


@dataclass
class ViewportBounds:
    """Inclusive cell bounds of the camera view."""

    x_min: int = 0
    x_max: int = 200
    y_min: int = 0
    y_max: int = 200


class LODZoneManager:
    """Decides which cells update on a given step.

    Cells inside the viewport always update; others update only on their
    region's turn.
    """

    def __init__(self, config: LODConfig) -> None:
        self.config = replace(config)
        self.viewport = ViewportBounds(0, config.nx, 0, config.ny)

    def set_viewport(self, bounds: ViewportBounds) -> None:
        self.viewport = replace(bounds)

    def get_region(self, x: int, y: int) -> int:
        """Quadrant index (0 top-left, 1 top-right, 2 bottom-left, 3 bottom-right)."""
        half_x = self.config.nx // 2
        half_y = self.config.ny // 2
        region = 0
        if x >= half_x:
            region += 1
        if y >= half_y:
            region += 2
        return region % self.config.num_regions

    def in_viewport(self, x: int, y: int) -> bool:
        vp = self.viewport
        return vp.x_min <= x <= vp.x_max and vp.y_min <= y <= vp.y_max

    def should_update(self, x: int, y: int, step_count: int) -> bool:
        if self.in_viewport(x, y):
            return True
        return self.get_region(x, y) == step_count % self.config.num_regions