"""Orbit camera used to view Gaussian scenes."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

Vec3 = tuple[float, float, float]


def _normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


@dataclass
class Camera:
    """A camera orbiting a target at a given distance, azimuth and elevation (degrees)."""

    position: Vec3 = (0.0, 0.0, 3.0)
    target: Vec3 = (0.0, 0.0, 0.0)
    up: Vec3 = (0.0, 1.0, 0.0)
    distance: float = 3.0
    azimuth: float = 0.0
    elevation: float = 0.0
    fov: float = 50.0
    aspect_ratio: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 100.0

    @classmethod
    def looking_at(cls, target: Vec3, distance: float) -> "Camera":
        """A default camera orbiting ``target`` at ``distance``."""
        camera = cls(target=tuple(float(v) for v in target), distance=float(distance))
        camera.update_position()
        return camera

    def update_position(self) -> None:
        """Recompute the position from the orbit parameters."""
        azimuth = math.radians(self.azimuth)
        elevation = math.radians(self.elevation)
        x = self.distance * math.cos(elevation) * math.sin(azimuth)
        y = self.distance * math.sin(elevation)
        z = self.distance * math.cos(elevation) * math.cos(azimuth)
        tx, ty, tz = self.target
        self.position = (tx + x, ty + y, tz + z)

    def rotate(self, delta_azimuth: float, delta_elevation: float) -> None:
        """Orbit by the given angles; elevation stays within [-89, 89] degrees."""
        self.azimuth += delta_azimuth
        self.elevation = min(max(self.elevation + delta_elevation, -89.0), 89.0)
        self.update_position()

    def zoom(self, delta: float) -> None:
        """Move toward or away from the target, never closer than 0.1."""
        self.distance = max(self.distance + delta, 0.1)
        self.update_position()

    def pan(self, delta_x: float, delta_y: float) -> None:
        """Shift the target in the camera's screen plane."""
        position = np.asarray(self.position, dtype=np.float64)
        target = np.asarray(self.target, dtype=np.float64)
        up_hint = np.asarray(self.up, dtype=np.float64)
        forward = _normalize(target - position)
        right = _normalize(np.cross(forward, up_hint))
        up = np.cross(right, forward)
        new_target = target + right * delta_x + up * delta_y
        self.target = tuple(new_target.tolist())
        self.update_position()

    def view_matrix(self) -> np.ndarray:
        """Right-handed look-at matrix, applied as ``matrix @ column_vector``."""
        eye = np.asarray(self.position, dtype=np.float64)
        center = np.asarray(self.target, dtype=np.float64)
        f = _normalize(center - eye)
        s = _normalize(np.cross(f, np.asarray(self.up, dtype=np.float64)))
        u = np.cross(s, f)
        return np.array(
            [
                [s[0], s[1], s[2], -eye.dot(s)],
                [u[0], u[1], u[2], -eye.dot(u)],
                [-f[0], -f[1], -f[2], eye.dot(f)],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    def projection_matrix(self) -> np.ndarray:
        """Right-handed perspective projection with depth mapped to [0, 1]."""
        half = 0.5 * math.radians(self.fov)
        h = math.cos(half) / math.sin(half)
        w = h / self.aspect_ratio
        r = self.far / (self.near - self.far)
        return np.array(
            [
                [w, 0.0, 0.0, 0.0],
                [0.0, h, 0.0, 0.0],
                [0.0, 0.0, r, r * self.near],
                [0.0, 0.0, -1.0, 0.0],
            ]
        )

    def view_projection_matrix(self) -> np.ndarray:
        """Projection combined with view."""
        return self.projection_matrix() @ self.view_matrix()