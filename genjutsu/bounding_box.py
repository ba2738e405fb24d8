"""Axis-aligned bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass

Vec3 = tuple[float, float, float]


@dataclass
class BoundingBox:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vec3 = (0.0, 0.0, 0.0)
    max: Vec3 = (0.0, 0.0, 0.0)

    def center(self) -> Vec3:
        """Midpoint of the box."""
        lo, hi = self.min, self.max
        return ((lo[0] + hi[0]) / 2.0, (lo[1] + hi[1]) / 2.0, (lo[2] + hi[2]) / 2.0)

    def size(self) -> Vec3:
        """Extent of the box along each axis."""
        lo, hi = self.min, self.max
        return (hi[0] - lo[0], hi[1] - lo[1], hi[2] - lo[2])