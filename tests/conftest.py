import pytest
from loguru import logger

from confstore.core.events import ConfigurationEvent


class RecordingListener:
    """
    Listener recording every event it receives.

    Checks are done from the front of the recorded list; each successful
    check consumes the event it looked at.
    """

    def __init__(self, source=None):
        self.source = source
        self.events = []

    def __call__(self, event: ConfigurationEvent):
        if self.source is not None:
            assert event.source is self.source, "Event from wrong source"
        self.events.append(event)

    def check_event(self, event_type, property_name, property_value, before_update):
        assert self.events, "Too few events received"
        event = self.events.pop(0)
        assert event.event_type == event_type
        assert event.property_name == property_name
        assert event.property_value == property_value
        assert event.before_update is before_update

    def check_event_count(self, minimum):
        assert len(self.events) >= minimum, f"Expected at least {minimum} events, got {len(self.events)}"

    def skip_to_last(self, event_type):
        """Drop all events before the last one of the given type."""
        indexes = [i for i, e in enumerate(self.events) if e.event_type == event_type]
        assert indexes, f"No event of type {event_type} received"
        del self.events[:indexes[-1]]

    def done(self):
        assert not self.events, f"Unexpected events: {self.events}"


@pytest.fixture
def make_listener():
    """Factory for RecordingListener instances."""
    return RecordingListener


@pytest.fixture
def log_messages():
    """Capture loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
