"""Subsystem interface and the registry that starts and stops them."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import ClassVar


class SubSystem(ABC):
    """A part of the engine with a start and a stop."""

    @abstractmethod
    def init(self) -> None:
        """Start the subsystem."""

    @abstractmethod
    def shutdown(self) -> None:
        """Stop the subsystem."""


class SubSystemRegistry:
    """Named subsystems, started and stopped together."""

    _instance: ClassVar[SubSystemRegistry | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._subsystems: dict[str, SubSystem] = {}
        self._stopped = threading.Condition()
        self._generation = 0

    @classmethod
    def get_instance(cls) -> SubSystemRegistry:
        """Return the process-wide registry."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def register(self, name: str, subsystem: SubSystem) -> None:
        """Register ``subsystem`` under ``name``, replacing any earlier one."""
        self._subsystems[name] = subsystem

    def get(self, name: str) -> SubSystem | None:
        """Return the subsystem called ``name``, or None."""
        return self._subsystems.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._subsystems

    def __len__(self) -> int:
        return len(self._subsystems)

    def init_all(self) -> None:
        for subsystem in list(self._subsystems.values()):
            subsystem.init()

    def shutdown_all(self) -> None:
        """Shut every subsystem down and release anyone in ``wait_for_all``."""
        for subsystem in list(self._subsystems.values()):
            subsystem.shutdown()
        with self._stopped:
            self._generation += 1
            self._stopped.notify_all()

    def wait_for_all(self, timeout: float | None = None) -> bool:
        """Block until ``shutdown_all`` runs or ``timeout`` seconds pass.

        With no timeout this waits indefinitely. Returns True when released
        by a shutdown and False on timeout.
        """
        with self._stopped:
            generation = self._generation
            return self._stopped.wait_for(
                lambda: self._generation != generation, timeout
            )