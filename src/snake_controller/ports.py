"""One-way output ports the controller sends notifications through."""

from __future__ import annotations

from typing import Protocol

from snake_controller.events import Event


class Port(Protocol):
    """Fire-and-forget sink for controller notifications."""

    def send(self, event: Event) -> None: ...


class RecordingPort:
    """Port that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[Event] = []

    def send(self, event: Event) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
