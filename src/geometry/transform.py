"""Local ↔ world transforms for placeable areas."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .polygon import Point2D


@dataclass(frozen=True)
class Transform2D:
    """Translation / rotation / scale mapping an area's local frame to world.

    Local → world applies scale, then rotation (counter-clockwise degrees),
    then translation.  A zero scale axis makes the transform degenerate:
    it cannot be inverted and nothing is contained in such an area.
    """

    position: Point2D = (0.0, 0.0)
    rotation_deg: float = 0.0
    scale: Point2D = (1.0, 1.0)

    @property
    def is_degenerate(self) -> bool:
        return self.scale[0] == 0 or self.scale[1] == 0

    @property
    def max_scale(self) -> float:
        """Larger of the two axis scale magnitudes."""
        return max(abs(self.scale[0]), abs(self.scale[1]))

    def apply(self, point: Point2D) -> Point2D:
        """Transform a local point to world coordinates."""
        sx, sy = self.scale
        x, y = point[0] * sx, point[1] * sy
        rad = math.radians(self.rotation_deg)
        cos_r = math.cos(rad)
        sin_r = math.sin(rad)
        return (
            self.position[0] + x * cos_r - y * sin_r,
            self.position[1] + x * sin_r + y * cos_r,
        )

    def inverse_apply(self, point: Point2D) -> Point2D | None:
        """Transform a world point to local coordinates (None if degenerate)."""
        if self.is_degenerate:
            return None
        dx = point[0] - self.position[0]
        dy = point[1] - self.position[1]
        rad = math.radians(self.rotation_deg)
        cos_r = math.cos(rad)
        sin_r = math.sin(rad)
        x = dx * cos_r + dy * sin_r
        y = -dx * sin_r + dy * cos_r
        return (x / self.scale[0], y / self.scale[1])


IDENTITY = Transform2D()
