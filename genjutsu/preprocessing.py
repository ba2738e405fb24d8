"""Turning multi-view images into model input and model output into clouds."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from PIL import Image

from .errors import InvalidConfigError
from .gaussian_cloud import GaussianCloud

IMAGE_SIZE = 256
NUM_VIEWS = 4
_VISIBLE_OPACITY = 0.01


@dataclass(frozen=True)
class CameraInfo:
    """Viewpoint of one input image, angles in degrees."""

    azimuth: float
    elevation: float
    radius: float

    @classmethod
    def default_4view(cls) -> tuple["CameraInfo", ...]:
        """Four views around the object at quarter turns."""
        return tuple(cls(azimuth=az, elevation=0.0, radius=2.0) for az in (0.0, 90.0, 180.0, 270.0))

    def to_features(self) -> tuple[float, ...]:
        """Six camera features fed to the model alongside the image."""
        az = math.radians(self.azimuth)
        el = math.radians(self.elevation)
        scaled = self.radius / 5.0
        return (math.sin(az), math.cos(az), math.sin(el), math.cos(el), scaled, scaled**2)


def preprocess_images(images: Sequence[Image.Image], cameras: Sequence[CameraInfo]) -> np.ndarray:
    """Build a ``[1, 4, 9, 256, 256]`` input from four images and their cameras."""
    if len(images) != NUM_VIEWS or len(cameras) != NUM_VIEWS:
        raise InvalidConfigError("Expected 4 images and 4 cameras")

    views = np.empty((NUM_VIEWS, 9, IMAGE_SIZE, IMAGE_SIZE), dtype=np.float32)
    for view, image, camera in zip(views, images, cameras):
        resized = image.convert("RGBA").resize((IMAGE_SIZE, IMAGE_SIZE), Image.LANCZOS)
        pixels = np.asarray(resized, dtype=np.float32)[..., :3] / 255.0
        view[0:3] = pixels.transpose(2, 0, 1)
        view[3:9] = np.asarray(camera.to_features(), dtype=np.float32)[:, None, None]

    return views.reshape(1, NUM_VIEWS, 9, IMAGE_SIZE, IMAGE_SIZE)


def tensor_to_gaussian_cloud(tensor: np.ndarray) -> GaussianCloud:
    """Collect the visible Gaussians of the first batch entry of a ``[B, N, 14]`` array."""
    tensor = np.asarray(tensor, dtype=np.float32)
    if tensor.ndim != 3 or tensor.shape[2] != 14:
        raise ValueError(f"expected array of shape [B, N, 14], got {tensor.shape}")

    cloud = GaussianCloud()
    if tensor.shape[0] == 0:
        return cloud
    rows = tensor[0]
    for row in rows[rows[:, 3] > _VISIBLE_OPACITY].tolist():
        cloud.add_gaussian(row[0:3], row[4:7], row[7:11], row[11:14], row[3])
    return cloud


def create_dummy_images() -> list[Image.Image]:
    """Four solid 256x256 images: red, green, blue and yellow."""
    colors = [(255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (255, 255, 0, 255)]
    return [Image.new("RGBA", (IMAGE_SIZE, IMAGE_SIZE), color) for color in colors]