import math

import numpy as np
import pytest
from PIL import Image

from genjutsu.errors import InvalidConfigError
from genjutsu.preprocessing import (
    CameraInfo,
    create_dummy_images,
    preprocess_images,
    tensor_to_gaussian_cloud,
)


def _test_cloud_tensor():
    rows = []
    for i in range(100):
        t = i / 100.0
        theta = t * math.tau
        r = 0.5 + 0.3 * math.sin(t * 5.0)
        position = [r * math.cos(theta), (t - 0.5) * 2.0, r * math.sin(theta)]
        rows.append(position + [0.8, 0.1, 0.1, 0.1, 1.0, 0.0, 0.0, 0.0, t, 1.0 - t, 0.5])
    return np.array([rows], dtype=np.float32)


def test_camera_features():
    camera = CameraInfo(azimuth=0.0, elevation=0.0, radius=2.0)
    features = camera.to_features()
    assert len(features) == 6
    assert features == pytest.approx((0.0, 1.0, 0.0, 1.0, 0.4, 0.16))


def test_default_4view():
    cameras = CameraInfo.default_4view()
    assert [c.azimuth for c in cameras] == [0.0, 90.0, 180.0, 270.0]
    assert all(c.elevation == 0.0 and c.radius == 2.0 for c in cameras)


def test_create_test_cloud():
    cloud = tensor_to_gaussian_cloud(_test_cloud_tensor())
    assert cloud.count == 100
    assert cloud.opacity[0] == pytest.approx(0.8)
    assert cloud.rotations[0] == (1.0, 0.0, 0.0, 0.0)


def test_tensor_to_cloud_skips_invisible():
    tensor = np.zeros((1, 2, 14), dtype=np.float32)
    tensor[0, 0, 3] = 0.5
    tensor[0, 0, 0:3] = [0.25, -0.5, 1.0]
    tensor[0, 1, 3] = 0.005
    cloud = tensor_to_gaussian_cloud(tensor)
    assert cloud.count == 1
    assert cloud.positions == [(0.25, -0.5, 1.0)]
    assert cloud.opacity == [0.5]


def test_tensor_to_cloud_rejects_wrong_shape():
    with pytest.raises(ValueError):
        tensor_to_gaussian_cloud(np.zeros((1, 2, 10)))


def test_create_dummy_images():
    images = create_dummy_images()
    assert len(images) == 4
    assert images[0].size == (256, 256)
    assert images[3].getpixel((10, 10)) == (255, 255, 0, 255)


def test_preprocess_images_layout():
    tensor = preprocess_images(create_dummy_images(), CameraInfo.default_4view())
    assert tensor.shape == (1, 4, 9, 256, 256)
    red_view = tensor[0, 0]
    assert np.allclose(red_view[0], 1.0)
    assert np.allclose(red_view[1], 0.0)
    assert np.allclose(red_view[2], 0.0)
    assert np.allclose(red_view[3:9, 5, 7], [0.0, 1.0, 0.0, 1.0, 0.4, 0.16], atol=1e-6)
    quarter_view = tensor[0, 1]
    assert quarter_view[3, 0, 0] == pytest.approx(1.0)
    assert quarter_view[4, 0, 0] == pytest.approx(0.0, abs=1e-6)


def test_preprocess_resizes_input():
    images = [Image.new("RGB", (32, 64), (0, 0, 255)) for _ in range(4)]
    tensor = preprocess_images(images, CameraInfo.default_4view())
    assert tensor.shape == (1, 4, 9, 256, 256)
    assert np.allclose(tensor[0, 2, 2], 1.0)


def test_preprocess_requires_four_views():
    with pytest.raises(InvalidConfigError):
        preprocess_images(create_dummy_images()[:1], CameraInfo.default_4view())
    with pytest.raises(InvalidConfigError):
        preprocess_images(create_dummy_images(), CameraInfo.default_4view()[:3])