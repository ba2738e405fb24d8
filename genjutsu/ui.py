"""Interface state: event queues between the panels and the application."""

from __future__ import annotations

import queue
from typing import Callable, Optional

from .events import AppEvent, UiEvent
from .panels import Panels


class UiEventSender:
    """Collects interface events raised while drawing."""

    def __init__(self) -> None:
        self._events: list[UiEvent] = []

    def instant(self, event: UiEvent) -> None:
        """Record an event."""
        self._events.append(event)

    def take_events(self) -> list[UiEvent]:
        """Return the recorded events and forget them."""
        events, self._events = self._events, []
        return events


class UiState:
    """Holds the panels, outgoing interface events and incoming application events."""

    def __init__(self, panels: Optional[Panels] = None) -> None:
        self.panels = panels if panels is not None else Panels()
        self._ui_outgoing: list[UiEvent] = []
        self._app_incoming: list[AppEvent] = []
        self._app_events: "queue.Queue[AppEvent]" = queue.Queue()

    def push_app_event(self, event: AppEvent) -> None:
        """Queue an application event for the panels."""
        self._app_incoming.append(event)

    def take_ui_events(self) -> list[UiEvent]:
        """Return the interface events waiting for the application and forget them."""
        events, self._ui_outgoing = self._ui_outgoing, []
        return events

    def app_event_sender(self) -> Callable[[AppEvent], None]:
        """A thread-safe function that other threads use to send application events."""
        return self._app_events.put

    def collect_sent_events(self) -> list[AppEvent]:
        """Move events sent from other threads into the incoming queue; return them."""
        collected: list[AppEvent] = []
        while True:
            try:
                collected.append(self._app_events.get_nowait())
            except queue.Empty:
                break
        self._app_incoming.extend(collected)
        return collected

    def after_draw_process(self, events_from_draw: list[UiEvent]) -> None:
        """Keep the events raised while drawing and broadcast pending application events."""
        self._ui_outgoing.extend(events_from_draw)
        incoming, self._app_incoming = self._app_incoming, []
        for event in incoming:
            self.panels.on_app_event(event)