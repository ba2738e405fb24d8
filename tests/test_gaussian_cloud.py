import pytest

from genjutsu.bounding_box import BoundingBox
from genjutsu.errors import InvalidGaussianCloudError
from genjutsu.gaussian_cloud import GaussianCloud


def _two_gaussians():
    cloud = GaussianCloud()
    cloud.add_gaussian([0.5, -1.25, 2.0], [0.1, 0.2, 0.3], [1.0, 0.0, 0.0, 0.0], [1.0, 0.0, 1.0], 0.75)
    cloud.add_gaussian([-3.0, 4.5, 0.0], [1.0, 2.0, 4.0], [0.5, 0.5, 0.5, 0.5], [0.0, 1.0, 0.0], 0.25)
    return cloud


def test_gaussian_cloud_creation():
    cloud = GaussianCloud()
    cloud.add_gaussian([0.0, 0.0, 0.0], [1.0, 1.0, 1.0], [1.0, 0.0, 0.0, 0.0], [1.0, 0.0, 0.0], 1.0)
    assert cloud.count == 1
    cloud.validate()
    assert len(cloud.positions) == cloud.count


def test_bounding_box():
    cloud = GaussianCloud()
    cloud.add_gaussian([1.0, 2.0, 3.0], [0.1] * 3, [1.0, 0.0, 0.0, 0.0], [1.0] * 3, 1.0)
    cloud.add_gaussian([-1.0, -2.0, -3.0], [0.1] * 3, [1.0, 0.0, 0.0, 0.0], [1.0] * 3, 1.0)
    bounds = cloud.bounds()
    assert bounds.min == (-1.0, -2.0, -3.0)
    assert bounds.max == (1.0, 2.0, 3.0)
    assert bounds.center() == (0.0, 0.0, 0.0)


def test_empty_cloud_bounds_are_default():
    assert GaussianCloud().bounds() == BoundingBox()


def test_ply_export():
    cloud = GaussianCloud()
    cloud.add_gaussian([0.0] * 3, [1.0] * 3, [1.0, 0.0, 0.0, 0.0], [1.0] * 3, 1.0)
    ply = cloud.to_ply()
    assert len(ply) > 0
    assert ply.startswith(b"ply\n")


def test_ply_header_and_size():
    ply = _two_gaussians().to_ply()
    header, _, data = ply.partition(b"end_header\n")
    assert b"element vertex 2\n" in header
    assert b"format binary_little_endian 1.0\n" in header
    assert len(data) == 2 * 59


def test_round_trip_bytes():
    cloud = _two_gaussians()
    restored = GaussianCloud.from_ply_bytes(cloud.to_ply())
    assert restored.count == 2
    assert restored.positions == cloud.positions
    assert restored.rotations == cloud.rotations
    assert restored.opacity == cloud.opacity
    assert restored.colors == cloud.colors
    restored.validate()


def test_round_trip_file(tmp_path):
    cloud = _two_gaussians()
    path = tmp_path / "cloud.ply"
    path.write_bytes(cloud.to_ply())
    restored = GaussianCloud.from_ply(path)
    assert restored.positions == cloud.positions
    assert restored.count == cloud.count


def test_from_ply_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        GaussianCloud.from_ply(tmp_path / "absent.ply")


def test_colors_are_saturated():
    cloud = GaussianCloud()
    cloud.add_gaussian([0.0] * 3, [1.0] * 3, [1.0, 0.0, 0.0, 0.0], [2.0, -0.5, 1.0], 1.0)
    restored = GaussianCloud.from_ply_bytes(cloud.to_ply())
    assert restored.colors == [(1.0, 0.0, 1.0)]


def test_missing_end_header():
    with pytest.raises(InvalidGaussianCloudError):
        GaussianCloud.from_ply_bytes(b"ply\nelement vertex 1\n")


def test_missing_vertex_count():
    with pytest.raises(InvalidGaussianCloudError):
        GaussianCloud.from_ply_bytes(b"ply\nformat binary_little_endian 1.0\nend_header\n")


def test_unparsable_vertex_count():
    with pytest.raises(InvalidGaussianCloudError):
        GaussianCloud.from_ply_bytes(b"ply\nelement vertex many\nend_header\n")


def test_truncated_data_keeps_complete_records():
    ply = _two_gaussians().to_ply()
    restored = GaussianCloud.from_ply_bytes(ply[:-10])
    assert restored.count == 1
    assert restored.positions == [(0.5, -1.25, 2.0)]


def test_validate_detects_inconsistency():
    cloud = _two_gaussians()
    cloud.opacity.pop()
    with pytest.raises(InvalidGaussianCloudError):
        cloud.validate()


def test_to_ply_rejects_short_lists():
    cloud = _two_gaussians()
    cloud.scales.pop()
    with pytest.raises(InvalidGaussianCloudError):
        cloud.to_ply()