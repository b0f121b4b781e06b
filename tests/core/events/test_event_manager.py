"""
Unit tests for the Event Manager system.

Tests the synchronous event bus that lets the battle engine announce rounds
and outcomes to subscribers through the publisher-subscriber pattern.
"""

from dataclasses import FrozenInstanceError
from unittest.mock import Mock

import pytest

from skirmish.core.data import BattleOutcome, LogCategory, LogLevel
from skirmish.core.events import (
    BattleEnded,
    DebugMessage,
    EventManager,
    EventType,
    LogMessage,
)


def make_log(text: str = "test", round_number: int = 1) -> LogMessage:
    return LogMessage(round_number=round_number, message=text)


class TestEvents:
    """Test event payloads."""

    def test_event_type_is_set(self):
        assert make_log().event_type == EventType.LOG_MESSAGE
        assert BattleEnded(round_number=3, outcome=BattleOutcome.DRAW).event_type == EventType.BATTLE_ENDED
        assert DebugMessage(round_number=0, message="m", source="s").event_type == EventType.DEBUG_MESSAGE

    def test_log_message_defaults(self):
        event = make_log()

        assert event.category == LogCategory.SYSTEM
        assert event.level == LogLevel.INFO
        assert event.source == "unknown"

    def test_events_are_immutable(self):
        event = make_log()

        with pytest.raises(FrozenInstanceError):
            event.message = "changed"


class TestEventManager:
    """Test EventManager functionality."""

    def test_event_manager_creation(self, event_manager):
        assert event_manager.get_statistics() == {
            'events_published': 0,
            'subscriber_errors': 0,
            'subscribers_count': 0,
            'universal_subscribers_count': 0,
        }
        assert event_manager.error_handler is None

    def test_subscribe_to_event_type(self, event_manager):
        event_manager.subscribe(EventType.LOG_MESSAGE, Mock())

        assert event_manager.get_statistics()['subscribers_count'] == 1

    def test_subscribe_to_all_events(self, event_manager):
        event_manager.subscribe_all(Mock())

        assert event_manager.get_statistics()['universal_subscribers_count'] == 1

    def test_publish_delivers_before_returning(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, subscriber)

        event = make_log()
        event_manager.publish(event)

        subscriber.assert_called_once_with(event)
        assert event_manager.get_statistics()['events_published'] == 1

    def test_events_arrive_in_publish_order(self, event_manager):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda event: received.append(event.message))

        for text in ("first", "second", "third"):
            event_manager.publish(make_log(text))

        assert received == ["first", "second", "third"]

    def test_type_subscribers_run_before_universal_subscribers(self, event_manager):
        calls = []
        event_manager.subscribe_all(lambda event: calls.append("all"))
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda event: calls.append("typed"))

        event_manager.publish(make_log())

        assert calls == ["typed", "all"]

    def test_type_subscribers_only_receive_their_type(self, event_manager):
        log_subscriber = Mock()
        debug_subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, log_subscriber)
        event_manager.subscribe(EventType.DEBUG_MESSAGE, debug_subscriber)

        event_manager.publish(make_log())

        log_subscriber.assert_called_once()
        debug_subscriber.assert_not_called()

    def test_universal_subscriber_receives_everything(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe_all(subscriber)

        event_manager.publish(make_log())
        event_manager.publish(BattleEnded(round_number=2, outcome=BattleOutcome.DRAW))

        assert subscriber.call_count == 2

    def test_publish_without_subscribers(self, event_manager):
        event_manager.publish(make_log())

        assert event_manager.get_statistics()['events_published'] == 1

    def test_unsubscribe(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, subscriber)

        assert event_manager.unsubscribe(EventType.LOG_MESSAGE, subscriber)
        assert not event_manager.unsubscribe(EventType.LOG_MESSAGE, subscriber)

        event_manager.publish(make_log())
        subscriber.assert_not_called()

    def test_unsubscribe_unknown_type(self, event_manager):
        assert not event_manager.unsubscribe(EventType.BATTLE_ENDED, Mock())


class TestSubscriberErrors:
    """A failing subscriber is reported and does not block the others."""

    def test_failing_subscriber_does_not_block_others(self, event_manager):
        errors = []
        event_manager.set_error_handler(errors.append)
        healthy = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, Mock(side_effect=RuntimeError("boom")), "failing")
        event_manager.subscribe(EventType.LOG_MESSAGE, healthy)

        event_manager.publish(make_log())

        healthy.assert_called_once()
        assert errors == ["Subscriber failing failed on LogMessage: boom"]
        assert event_manager.get_statistics()['subscriber_errors'] == 1

    def test_errors_are_counted_without_handler(self, event_manager):
        event_manager.subscribe_all(Mock(side_effect=ValueError("bad")))

        event_manager.publish(make_log())
        event_manager.publish(make_log())

        assert event_manager.get_statistics()['subscriber_errors'] == 2

    def test_subscriber_name_defaults_to_function_name(self, event_manager):
        errors = []
        event_manager.set_error_handler(errors.append)

        def broken_listener(event):
            raise KeyError("missing")

        event_manager.subscribe(EventType.LOG_MESSAGE, broken_listener)
        event_manager.publish(make_log())

        assert errors[0].startswith("Subscriber broken_listener failed on LogMessage")

    def test_clear_error_handler(self, event_manager):
        handler = Mock()
        event_manager.set_error_handler(handler)
        event_manager.set_error_handler(None)
        event_manager.subscribe_all(Mock(side_effect=RuntimeError("boom")))

        event_manager.publish(make_log())

        handler.assert_not_called()
        assert event_manager.error_handler is None


def test_subscriber_may_publish_during_delivery():
    event_manager = EventManager()
    received = []

    def relay(event):
        if event.message == "outer":
            event_manager.publish(make_log("inner"))

    event_manager.subscribe(EventType.LOG_MESSAGE, relay)
    event_manager.subscribe(EventType.LOG_MESSAGE, lambda event: received.append(event.message))

    event_manager.publish(make_log("outer"))

    assert received == ["inner", "outer"]
