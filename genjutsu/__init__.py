"""Gaussian splat clouds with PLY I/O, an orbit camera, a small multi-view model and a GaussianDreamer client."""

__version__ = "0.1.0"