"""Collections of 3D Gaussians and their binary PLY serialization."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Optional, Sequence, Union

import numpy as np

from .bounding_box import BoundingBox
from .errors import InvalidGaussianCloudError

Vec3 = tuple[float, float, float]
Vec4 = tuple[float, float, float, float]

_END_HEADER = b"end_header"
_VERTEX_COUNT = re.compile(r"\+?[0-9]+", re.ASCII)

# Packed record layout: 3 position, 3 normal, 3 color bytes, opacity, 3 scale, 4 rotation.
_VERTEX_DTYPE = np.dtype(
    [
        ("position", "<f4", (3,)),
        ("normal", "<f4", (3,)),
        ("color", "u1", (3,)),
        ("opacity", "<f4"),
        ("scale", "<f4", (3,)),
        ("rotation", "<f4", (4,)),
    ]
)

_PROPERTIES = (
    "float x",
    "float y",
    "float z",
    "float nx",
    "float ny",
    "float nz",
    "uchar red",
    "uchar green",
    "uchar blue",
    "float opacity",
    "float scale_0",
    "float scale_1",
    "float scale_2",
    "float rot_0",
    "float rot_1",
    "float rot_2",
    "float rot_3",
)


def _parse_vertex_count(header: str) -> int:
    for raw in header.split("\n"):
        line = raw.rstrip("\r")
        if line.startswith("element vertex"):
            tokens = line.split()
            if tokens and _VERTEX_COUNT.fullmatch(tokens[-1]):
                return int(tokens[-1])
            break
    raise InvalidGaussianCloudError("No vertex count found")


@dataclass
class GaussianCloud:
    """A set of Gaussians stored as parallel per-attribute lists."""

    count: int = 0
    positions: list[Vec3] = field(default_factory=list)
    scales: list[Vec3] = field(default_factory=list)
    rotations: list[Vec4] = field(default_factory=list)
    colors: list[Vec3] = field(default_factory=list)
    opacity: list[float] = field(default_factory=list)
    sh_coefficients: Optional[list[list[float]]] = None

    def add_gaussian(
        self,
        position: Sequence[float],
        scale: Sequence[float],
        rotation: Sequence[float],
        color: Sequence[float],
        opacity: float,
    ) -> None:
        """Append one Gaussian; rotation is a (w, x, y, z) quaternion."""
        self.positions.append(tuple(float(v) for v in position))
        self.scales.append(tuple(float(v) for v in scale))
        self.rotations.append(tuple(float(v) for v in rotation))
        self.colors.append(tuple(float(v) for v in color))
        self.opacity.append(float(opacity))
        self.count += 1

    def bounds(self) -> BoundingBox:
        """Axis-aligned box enclosing every position; NaN coordinates are ignored."""
        if self.count == 0:
            return BoundingBox()
        points = np.asarray(self.positions, dtype=np.float64).reshape(-1, 3)
        lo = np.fmin.reduce(points, axis=0, initial=np.inf)
        hi = np.fmax.reduce(points, axis=0, initial=-np.inf)
        return BoundingBox(min=tuple(lo.tolist()), max=tuple(hi.tolist()))

    @classmethod
    def from_ply(cls, path: Union[str, os.PathLike]) -> "GaussianCloud":
        """Read a cloud from a binary little-endian PLY file."""
        with open(path, "rb") as handle:
            return cls.from_ply_bytes(handle.read())

    @classmethod
    def from_ply_bytes(cls, contents: bytes) -> "GaussianCloud":
        """Parse a cloud from the bytes of a binary little-endian PLY file.

        Records past the end of the data are silently dropped.
        """
        header_end = contents.find(_END_HEADER)
        if header_end < 0:
            raise InvalidGaussianCloudError("No end_header found")

        header = contents[:header_end].decode("utf-8", errors="replace")
        vertex_count = _parse_vertex_count(header)

        data_start = header_end + len(_END_HEADER) + 1
        if data_start > len(contents):
            raise InvalidGaussianCloudError("No data after end_header")
        data = contents[data_start:]

        record_size = _VERTEX_DTYPE.itemsize
        available = min(vertex_count, len(data) // record_size)
        cloud = cls()
        if available == 0:
            return cloud

        records = np.frombuffer(bytes(data[: available * record_size]), dtype=_VERTEX_DTYPE)
        colors = records["color"].astype(np.float32) / np.float32(255.0)

        for position, scale, rotation, color, opacity in zip(
            records["position"].tolist(),
            records["scale"].tolist(),
            records["rotation"].tolist(),
            colors.tolist(),
            records["opacity"].tolist(),
        ):
            cloud.add_gaussian(position, scale, rotation, color, opacity)
        return cloud

    def to_ply(self) -> bytes:
        """Serialize the cloud as a binary little-endian PLY file."""
        n = self.count
        if any(
            len(values) < n
            for values in (self.positions, self.scales, self.rotations, self.colors, self.opacity)
        ):
            raise InvalidGaussianCloudError("Inconsistent array lengths")

        header_lines = ["ply", "format binary_little_endian 1.0", f"element vertex {n}"]
        header_lines.extend(f"property {prop}" for prop in _PROPERTIES)
        header_lines.append("end_header")
        header = "".join(f"{line}\n" for line in header_lines).encode("ascii")

        records = np.zeros(n, dtype=_VERTEX_DTYPE)
        if n:
            with np.errstate(all="ignore"):
                records["position"] = np.asarray(self.positions[:n], dtype=np.float64).reshape(n, 3)
                records["opacity"] = np.asarray(self.opacity[:n], dtype=np.float64)
                records["scale"] = np.asarray(self.scales[:n], dtype=np.float64).reshape(n, 3)
                records["rotation"] = np.asarray(self.rotations[:n], dtype=np.float64).reshape(n, 4)
                scaled = np.asarray(self.colors[:n], dtype=np.float32).reshape(n, 3) * np.float32(255.0)
                scaled = np.nan_to_num(scaled, nan=0.0, posinf=255.0, neginf=0.0)
                records["color"] = np.clip(scaled, 0.0, 255.0).astype(np.uint8)
        return header + records.tobytes()

    def validate(self) -> None:
        """Raise if any attribute list does not hold exactly ``count`` entries."""
        if any(
            len(values) != self.count
            for values in (self.positions, self.scales, self.rotations, self.colors, self.opacity)
        ):
            raise InvalidGaussianCloudError("Inconsistent array lengths")