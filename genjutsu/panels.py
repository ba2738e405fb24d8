"""Interface panels and how they react to application events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from .events import (
    AppEvent,
    GaussianCloudReady,
    GenerateFromPrompt,
    LoadImages,
    Progress,
    ResetCamera,
    SceneReady,
    Status,
    ToggleWireframe,
    UiEvent,
)

Rgb = tuple[int, int, int]

EXAMPLE_PROMPTS = (
    "a red sports car",
    "a blue crystal gem",
    "a yellow rubber duck",
    "a green cactus plant",
    "a purple alien creature",
)

ERROR_COLOR: Rgb = (255, 100, 100)
SUCCESS_COLOR: Rgb = (100, 255, 100)
INFO_COLOR: Rgb = (140, 160, 255)

_ERROR_MARKERS = ("Error", "Failed")
_SUCCESS_MARKERS = ("Generated", "ready")
_DONE_MARKERS = ("Generated", "Error", "Failed", "ready")


class EventSink(Protocol):
    """Anything that accepts interface events."""

    def instant(self, event: UiEvent) -> None: ...


@dataclass
class SidePanel:
    """Prompt entry, image loading, render settings, status and camera controls."""

    show_grid: bool = False
    last_status: Optional[str] = None
    prompt_text: str = ""
    is_generating: bool = False

    def can_generate(self) -> bool:
        """Whether the generate action is available."""
        return not self.is_generating and bool(self.prompt_text.strip())

    def generate(self, sender: EventSink) -> bool:
        """Request generation from the current prompt; False if the action is unavailable."""
        if not self.can_generate():
            return False
        sender.instant(GenerateFromPrompt(self.prompt_text))
        self.is_generating = True
        return True

    def load_images(self, sender: EventSink) -> bool:
        """Request loading images from files; False if a generation is running."""
        if self.is_generating:
            return False
        sender.instant(LoadImages())
        self.is_generating = True
        return True

    def apply_grid_toggle(self, sender: EventSink) -> None:
        """Send the current grid setting."""
        sender.instant(ToggleWireframe(self.show_grid))

    def reset_camera(self, sender: EventSink) -> None:
        """Request a camera reset."""
        sender.instant(ResetCamera())

    def choose_example(self, example: str) -> None:
        """Put an example prompt into the prompt field."""
        self.prompt_text = example

    def status_color(self) -> Optional[Rgb]:
        """Color for the status line, or None when there is no status."""
        status = self.last_status
        if status is None:
            return None
        if any(marker in status for marker in _ERROR_MARKERS):
            return ERROR_COLOR
        if any(marker in status for marker in _SUCCESS_MARKERS):
            return SUCCESS_COLOR
        return INFO_COLOR

    def on_app_event(self, event: AppEvent) -> None:
        """Update the panel from an application event."""
        if isinstance(event, Status):
            self.last_status = event.message
            if any(marker in event.message for marker in _DONE_MARKERS):
                self.is_generating = False
        elif isinstance(event, Progress):
            self.last_status = f"Loading {event.value * 100.0:.0f}%"
        elif isinstance(event, SceneReady):
            self.last_status = "Scene ready"
            self.is_generating = False
        elif isinstance(event, GaussianCloudReady):
            self.is_generating = False


@dataclass
class Panels:
    """All panels of the interface."""

    side: SidePanel = field(default_factory=SidePanel)

    def on_app_event(self, event: AppEvent) -> None:
        """Pass an application event to every panel."""
        self.side.on_app_event(event)