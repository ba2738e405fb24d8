"""Client for a GaussianDreamer text-to-3D generation service."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import requests

from .errors import InvalidConfigError

_TIMEOUT = 30.0


@dataclass
class GaussianDreamerConfig:
    """Where the service runs and how it should generate."""

    service_url: str = "http://127.0.0.1:5000"
    guidance_scale: float = 7.5
    num_iterations: int = 500


def _optional_str(payload: dict, key: str) -> Optional[str]:
    value = payload.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field '{key}' is not a string")
    return value


def _parse_response(response: requests.Response) -> tuple[str, Optional[str], Optional[str]]:
    payload: Any = response.json()
    if not isinstance(payload, dict):
        raise ValueError("response is not an object")
    status = payload.get("status")
    if not isinstance(status, str):
        raise ValueError("missing field 'status'")
    return status, _optional_str(payload, "output_path"), _optional_str(payload, "error")


def generate_gaussians_from_prompt(
    prompt: str, config: Optional[GaussianDreamerConfig] = None
) -> Path:
    """Ask the service to generate Gaussians for ``prompt``; return the .ply path it wrote."""
    config = config or GaussianDreamerConfig()
    print(f"Sending prompt to GaussianDreamer service: '{prompt}'")

    body = {
        "prompt": prompt,
        "guidance_scale": config.guidance_scale,
        "num_iterations": config.num_iterations,
    }
    try:
        response = requests.post(f"{config.service_url}/generate", json=body, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise InvalidConfigError(
            f"Failed to connect to GaussianDreamer service: {exc}. "
            "Make sure the Python service is running."
        ) from exc

    if not response.ok:
        reason = f" {response.reason}" if response.reason else ""
        raise InvalidConfigError(
            f"GaussianDreamer service returned error: {response.status_code}{reason}"
        )

    try:
        status, output_path, error = _parse_response(response)
    except ValueError as exc:
        raise InvalidConfigError(f"Failed to parse response: {exc}") from exc

    if status == "success":
        if output_path is None:
            raise InvalidConfigError("No output path returned")
        print(f"✓ GaussianDreamer generated: {output_path}")
        return Path(output_path)
    if status == "error":
        raise InvalidConfigError(f"GaussianDreamer error: {error or 'Unknown error'}")
    raise InvalidConfigError(f"Unexpected status: {status}")


def check_service_health(service_url: str) -> bool:
    """Whether the service answers its health check successfully."""
    try:
        response = requests.get(f"{service_url}/health", timeout=_TIMEOUT)
    except requests.RequestException:
        return False
    return response.ok