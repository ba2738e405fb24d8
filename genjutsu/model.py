"""A small convolutional model mapping multi-view images to Gaussian parameters."""

from __future__ import annotations

import itertools
from typing import Optional

import numpy as np

PARAMS_PER_GAUSSIAN = 14
INPUT_CHANNELS = 9


def _init_conv(
    rng: np.random.Generator, in_channels: int, out_channels: int, kernel: int
) -> tuple[np.ndarray, np.ndarray]:
    fan_in = in_channels * kernel * kernel
    bound = 1.0 / np.sqrt(fan_in)
    weight = rng.uniform(-bound, bound, (out_channels, in_channels, kernel, kernel))
    bias = rng.uniform(-bound, bound, out_channels)
    return weight.astype(np.float32), bias.astype(np.float32)


def _conv2d(x: np.ndarray, weight: np.ndarray, bias: np.ndarray) -> np.ndarray:
    n, _, h, w = x.shape
    kernel = weight.shape[-1]
    pad = kernel // 2
    padded = np.pad(x, ((0, 0), (0, 0), (pad, pad), (pad, pad)))
    out = np.zeros((n, weight.shape[0], h, w), dtype=np.float32)
    for i, j in itertools.product(range(kernel), repeat=2):
        out += np.einsum("oc,nchw->nohw", weight[:, :, i, j], padded[:, :, i : i + h, j : j + w])
    out += bias[None, :, None, None]
    return out


class LGMModel:
    """Two convolutions producing 14 parameters per pixel per view."""

    def __init__(self, seed: Optional[int] = None) -> None:
        rng = np.random.default_rng(seed)
        self.conv_in_weight, self.conv_in_bias = _init_conv(rng, INPUT_CHANNELS, 64, 3)
        self.conv_out_weight, self.conv_out_bias = _init_conv(rng, 64, PARAMS_PER_GAUSSIAN, 1)

    def forward(self, images: np.ndarray) -> np.ndarray:
        """Map ``[B, V, 9, H, W]`` input to ``[B, V*H*W, 14]`` Gaussian parameters."""
        images = np.asarray(images, dtype=np.float32)
        if images.ndim != 5 or images.shape[2] != INPUT_CHANNELS:
            raise ValueError(f"expected input of shape [B, V, 9, H, W], got {images.shape}")
        b, views, _, h, w = images.shape

        x = images.reshape(b * views, INPUT_CHANNELS, h, w)
        x = _conv2d(x, self.conv_in_weight, self.conv_in_bias)
        x = np.maximum(x, 0.0)
        x = _conv2d(x, self.conv_out_weight, self.conv_out_bias)

        x = x.reshape(b * views, PARAMS_PER_GAUSSIAN, h * w).swapaxes(1, 2)
        x = x.reshape(b, views * h * w, PARAMS_PER_GAUSSIAN)
        return self.apply_activations(x)

    def apply_activations(self, x: np.ndarray) -> np.ndarray:
        """Bring raw ``[B, N, 14]`` outputs into the valid range of each parameter."""
        x = np.asarray(x, dtype=np.float32)
        if x.ndim != 3 or x.shape[2] != PARAMS_PER_GAUSSIAN:
            raise ValueError(f"expected input of shape [B, N, 14], got {x.shape}")

        out = np.empty_like(x)
        out[..., 0:3] = np.clip(x[..., 0:3], -1.0, 1.0)
        out[..., 3] = 1.0 / (1.0 + np.exp(-x[..., 3]))
        out[..., 4:7] = np.logaddexp(0.0, x[..., 4:7]) * 0.1

        quat = x[..., 7:11]
        norm = np.sqrt(np.sum(quat * quat, axis=-1, keepdims=True))
        norm = np.where(norm > 1e-8, norm, 1.0)
        out[..., 7:11] = quat / norm

        out[..., 11:14] = np.tanh(x[..., 11:14]) * 0.5 + 0.5
        return out