"""Events exchanged between the user interface and the application."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class ResetCamera:
    """The user asked to reset the camera."""


@dataclass(frozen=True)
class LoadImages:
    """The user asked to load multi-view images from files."""


@dataclass(frozen=True)
class GenerateFromPrompt:
    """The user asked to generate a model from a text prompt."""

    prompt: str


@dataclass(frozen=True)
class PromptChanged:
    """The prompt text was edited."""

    prompt: str


@dataclass(frozen=True)
class ToggleWireframe:
    """The user toggled the grid/wireframe display."""

    enabled: bool


@dataclass(frozen=True)
class UiLog:
    """A log message coming from the interface."""

    message: str


@dataclass(frozen=True)
class ImagesLoaded:
    """Input images finished loading."""


@dataclass(frozen=True)
class GaussianCloudReady:
    """A Gaussian cloud is available."""


@dataclass(frozen=True)
class CameraResetDone:
    """The camera was reset."""


@dataclass(frozen=True)
class Status:
    """A new status line for the interface."""

    message: str


@dataclass(frozen=True)
class Progress:
    """Progress of a running task, from 0.0 to 1.0."""

    value: float


@dataclass(frozen=True)
class AppLog:
    """A log message coming from the application."""

    message: str


@dataclass(frozen=True)
class WireframeState:
    """The current grid/wireframe display state."""

    enabled: bool


@dataclass(frozen=True)
class SceneReady:
    """A scene is loaded and can be shown."""


UiEvent = Union[ResetCamera, LoadImages, GenerateFromPrompt, PromptChanged, ToggleWireframe, UiLog]
AppEvent = Union[
    ImagesLoaded,
    GaussianCloudReady,
    CameraResetDone,
    Status,
    Progress,
    AppLog,
    WireframeState,
    SceneReady,
]