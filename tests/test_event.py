import dataclasses

import pytest

from openempires.event import Event, EventLoopListener, EventType


def test_default_constructor():
    event = Event()
    assert event.type is EventType.NONE


def test_parameterized_constructor():
    event = Event(EventType.TICK)
    assert event.type is EventType.TICK


def test_event_is_immutable():
    event = Event(EventType.TICK)
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.type = EventType.NONE
    assert event.type is EventType.TICK


def test_listener_is_abstract():
    with pytest.raises(TypeError):
        EventLoopListener()


def test_listener_subclass_receives_events():
    class Recorder(EventLoopListener):
        def __init__(self):
            self.seen = []

        def on_init(self):
            self.seen.append("init")

        def on_exit(self):
            self.seen.append("exit")

        def on_event(self, event):
            self.seen.append(event.type)

    recorder = Recorder()
    recorder.on_init()
    recorder.on_event(Event(EventType.TICK))
    recorder.on_exit()
    assert recorder.seen == ["init", EventType.TICK, "exit"]