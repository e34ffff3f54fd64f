"""Event sink tests."""

import logging

from taskhours.domain.project import Project, TaskDeleted
from taskhours.domain.shared import DomainEvent
from taskhours.infrastructure.events import (
    CallbackEventSink,
    InMemoryEventSink,
    LoggingEventSink,
)


def test_in_memory_sink_keeps_order():
    sink = InMemoryEventSink()
    first, second = DomainEvent(), DomainEvent()

    sink.publish(first)
    sink.publish(second)

    assert sink.events == (first, second)
    assert list(sink) == [first, second]
    assert len(sink) == 2


def test_in_memory_sink_filters_and_clears():
    sink = InMemoryEventSink()
    project = Project(sink=sink)
    task = project.add_task("A", 1).value
    sink.publish(DomainEvent())
    project.delete_task(task.id)

    assert [e.task_id for e in sink.of_type(TaskDeleted)] == [task.id]

    sink.clear()
    assert len(sink) == 0


def test_empty_in_memory_sink_is_still_used():
    sink = InMemoryEventSink()
    project = Project(sink=sink)
    task = project.add_task("A", 1).value

    project.delete_task(task.id)

    assert len(sink) == 1


def test_logging_sink_writes_record(caplog):
    sink = LoggingEventSink(level=logging.WARNING)
    event = DomainEvent()

    with caplog.at_level(logging.WARNING):
        sink.publish(event)

    assert "DomainEvent" in caplog.text
    assert str(event.event_id) in caplog.text


def test_callback_sink_forwards():
    received = []
    project = Project(sink=CallbackEventSink(received.append))
    task = project.add_task("A", 2).value

    project.delete_task(task.id)

    assert [e.name for e in received] == ["A"]
