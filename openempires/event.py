"""Events and the listener interface for the event loop."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class EventType(Enum):
    """Kinds of event."""

    NONE = 0
    TICK = 1


@dataclass(frozen=True)
class Event:
    """An immutable event of a given type."""

    type: EventType = EventType.NONE


class EventLoopListener(ABC):
    """Receives notifications from an event loop."""

    @abstractmethod
    def on_init(self) -> None:
        """Called when the listener starts."""

    @abstractmethod
    def on_exit(self) -> None:
        """Called when the listener stops."""

    @abstractmethod
    def on_event(self, event: Event) -> None:
        """Called for each event."""