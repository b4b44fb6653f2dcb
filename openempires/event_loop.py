"""A background loop that sends tick events to listeners."""

from __future__ import annotations

import logging
import threading
import time

from openempires.event import Event, EventLoopListener, EventType
from openempires.subsystem import SubSystem

log = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.016
_POLL_INTERVAL = 0.001


class EventLoop(SubSystem):
    """Sends a TICK event to every listener about sixty times a second."""

    def __init__(self, tick_rate: float = DEFAULT_TICK_RATE) -> None:
        self._tick_rate = tick_rate
        self._listeners: list[EventLoopListener] = []
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def register_listener(self, listener: EventLoopListener) -> None:
        with self._lock:
            self._listeners.append(listener)

    def deregister_listener(self, listener: EventLoopListener) -> None:
        """Remove ``listener``; unknown listeners are ignored."""
        with self._lock:
            self._listeners = [l for l in self._listeners if l is not listener]

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def init(self) -> None:
        """Start the loop on a background thread."""
        if self.running:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="EventLoop", daemon=True
        )
        self._thread.start()

    def shutdown(self) -> None:
        """Stop the loop and wait for its thread to finish."""
        self._stop.set()
        thread, self._thread = self._thread, None
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def _run(self) -> None:
        log.info("Starting event loop...")
        last_tick = time.monotonic()
        while not self._stop.is_set():
            now = time.monotonic()
            if now - last_tick >= self._tick_rate:
                last_tick = now
                event = Event(EventType.TICK)
                with self._lock:
                    listeners = list(self._listeners)
                for listener in listeners:
                    listener.on_event(event)
            self._stop.wait(_POLL_INTERVAL)