"""
Event bus tests.
"""
from apps.users.domain.events import UserCreatedEvent
from apps.users.infrastructure.services import EventBusPublisher


def test_delivers_to_subscribers_in_order(event_bus):
    received = []
    event_bus.subscribe('user.created', lambda event: received.append(('first', event)))
    event_bus.subscribe('user.created', lambda event: received.append(('second', event)))

    delivered = event_bus.publish('user.created', 'payload')

    assert delivered == 2
    assert received == [('first', 'payload'), ('second', 'payload')]


def test_topics_are_isolated(event_bus):
    received = []
    event_bus.subscribe('user.created', received.append)

    assert event_bus.publish('user.deleted', 'payload') == 0
    assert received == []


def test_failing_handler_does_not_stop_others(event_bus, caplog):
    received = []

    def broken(event):
        raise RuntimeError('boom')

    event_bus.subscribe('user.created', broken)
    event_bus.subscribe('user.created', received.append)

    delivered = event_bus.publish('user.created', 'payload')

    assert delivered == 1
    assert received == ['payload']
    assert 'failed on topic=user.created' in caplog.text


def test_duplicate_subscription_is_ignored(event_bus):
    received = []
    event_bus.subscribe('user.created', received.append)
    event_bus.subscribe('user.created', received.append)

    event_bus.publish('user.created', 'payload')

    assert received == ['payload']


def test_unsubscribe_and_clear(event_bus):
    received = []
    event_bus.subscribe('user.created', received.append)
    event_bus.unsubscribe('user.created', received.append)
    event_bus.unsubscribe('user.created', received.append)

    event_bus.publish('user.created', 'payload')
    assert received == []

    event_bus.subscribe('user.created', received.append)
    event_bus.clear()
    assert event_bus.handlers_for('user.created') == []


def test_publisher_swallows_handler_errors(event_bus):
    def broken(event):
        raise RuntimeError('boom')

    event_bus.subscribe('user.created', broken)

    event = UserCreatedEvent(user_id='id-1', username='bob_02', email='bob@example.com', has_password=False)

    EventBusPublisher(event_bus).publish('user.created', event)


def test_users_module_subscribes_at_startup():
    from apps.users.subscribers import enqueue_user_created
    from shared.infrastructure.events import event_bus

    assert enqueue_user_created in event_bus.handlers_for('user.created')
