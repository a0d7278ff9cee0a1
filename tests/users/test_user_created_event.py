"""
User created event tests.
"""
import dataclasses
from datetime import datetime, timezone

import pytest

from apps.users.domain.events import USER_CREATED, UserCreatedEvent


def make_event(**overrides):
    values = dict(user_id='user-1', username='bob_02', email='bob@example.com', has_password=False)
    values.update(overrides)
    return UserCreatedEvent(**values)


def test_topic_name():
    assert USER_CREATED == 'user.created'


def test_occurred_at_defaults_to_now():
    before = datetime.now(timezone.utc)
    event = make_event()
    after = datetime.now(timezone.utc)

    assert before <= event.occurred_at <= after
    assert event.event_type == 'UserCreatedEvent'


def test_events_are_immutable():
    event = make_event()

    with pytest.raises(dataclasses.FrozenInstanceError):
        event.has_password = True


def test_payload_survives_json_boundary():
    event = make_event(has_password=True)

    restored = UserCreatedEvent.from_payload(event.to_payload())

    assert restored == event


def test_payload_is_json_friendly():
    payload = make_event().to_payload()

    assert all(isinstance(value, (str, bool)) for value in payload.values())
    assert 'password' not in payload
