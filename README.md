# genjutsu

Tools for working with 3D Gaussian splat clouds.

- `genjutsu.gaussian_cloud.GaussianCloud` holds positions, scales, rotations
  (`(w, x, y, z)` quaternions), colours and opacities as parallel lists. It
  reads and writes binary little-endian PLY files (`from_ply`,
  `from_ply_bytes`, `to_ply`), checks that its lists agree in length
  (`validate`) and computes its `bounds()` as a
  `genjutsu.bounding_box.BoundingBox` with `center()` and `size()`.
- `genjutsu.camera.Camera` is an orbit camera around a target, with
  `rotate` (elevation kept within ±89°), `zoom` (distance never below 0.1),
  `pan`, and `view_matrix()`, `projection_matrix()` and
  `view_projection_matrix()` as 4×4 NumPy arrays.
- `genjutsu.model.LGMModel` is a small two-layer convolutional model that maps
  a `[B, V, 9, H, W]` input to `[B, V*H*W, 14]` Gaussian parameters. Its
  weights are randomly initialised from an optional `seed`; no trained weights
  are loaded.
- `genjutsu.preprocessing` builds that input from four Pillow images and their
  `CameraInfo` viewpoints (`preprocess_images`), turns model output into a
  cloud keeping Gaussians with opacity above 0.01 (`tensor_to_gaussian_cloud`),
  and makes four solid-colour test images (`create_dummy_images`).
- `genjutsu.dreamer_client` sends a text prompt to a GaussianDreamer HTTP
  service (`generate_gaussians_from_prompt`, configured by
  `GaussianDreamerConfig`, default `http://127.0.0.1:5000`) and returns the
  path of the `.ply` file it reports; `check_service_health` queries its
  `/health` endpoint.
- `genjutsu.events`, `genjutsu.panels` and `genjutsu.ui` model the state of a
  viewer interface: event types passed between interface and application, a
  `SidePanel` that tracks the prompt, grid setting, status line and whether a
  generation is running, and a `UiState` that queues events in both directions.

Errors are raised as subclasses of `genjutsu.errors.GenjutsuError`, such as
`InvalidConfigError` and `InvalidGaussianCloudError`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Examples

Clouds and PLY files:

```python
from genjutsu.gaussian_cloud import GaussianCloud

cloud = GaussianCloud()
cloud.add_gaussian([1.0, 2.0, 3.0], [0.1] * 3, [1.0, 0.0, 0.0, 0.0], [1.0] * 3, 1.0)
cloud.add_gaussian([-1.0, -2.0, -3.0], [0.1] * 3, [1.0, 0.0, 0.0, 0.0], [1.0] * 3, 1.0)

box = cloud.bounds()
print(box.center())   # (0.0, 0.0, 0.0)

data = cloud.to_ply()
again = GaussianCloud.from_ply_bytes(data)
assert again.count == 2
```

From four views to a cloud:

```python
from genjutsu.model import LGMModel
from genjutsu.preprocessing import (
    CameraInfo,
    create_dummy_images,
    preprocess_images,
    tensor_to_gaussian_cloud,
)

model = LGMModel(seed=0)
inputs = preprocess_images(create_dummy_images(), CameraInfo.default_4view())
cloud = tensor_to_gaussian_cloud(model.forward(inputs))
print(cloud.count)
```

`preprocess_images` needs exactly four images and four cameras and raises
`InvalidConfigError` otherwise.

Camera:

```python
from genjutsu.camera import Camera

camera = Camera()
camera.rotate(45.0, 30.0)
camera.zoom(-1.0)
mvp = camera.view_projection_matrix()   # projection @ view
```

## What this package does not do

There is no viewer: nothing here opens a window, draws the splats or the
interface panels, or handles mouse input. There is no ready-made pipeline
object or background worker that runs generation for you; the model,
preprocessing and service client are combined by your own code as in the
example above. There is no command-line program.