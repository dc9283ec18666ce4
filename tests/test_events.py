import pytest

from rodgame.events import EventBroadcaster, EventListener


class Recorder(EventListener):
    def __init__(self, key):
        self._key = key
        self.received = []

    @property
    def key(self):
        return self._key

    def on_event_trigger(self, parameters):
        self.received.append(parameters)


def test_listener_cannot_be_abstract():
    with pytest.raises(TypeError):
        EventListener()


def test_broadcast_reaches_only_matching_key():
    hub = EventBroadcaster()
    hit, miss = Recorder("hit"), Recorder("reload")
    hub.register_listener(hit)
    hub.register_listener(miss)
    hub.broadcast("hit", {"damage": 3})
    assert hit.received == [{"damage": 3}]
    assert miss.received == []


def test_broadcast_without_parameters_sends_empty_mapping():
    hub = EventBroadcaster()
    listener = Recorder("hit")
    hub.register_listener(listener)
    hub.broadcast("hit")
    assert listener.received == [{}]


def test_broadcast_to_every_listener_of_key_in_order():
    hub = EventBroadcaster()
    order = []

    class Tagged(Recorder):
        def on_event_trigger(self, parameters):
            order.append(self)

    first, second = Tagged("k"), Tagged("k")
    hub.register_listener(first)
    hub.register_listener(second)
    hub.broadcast("k")
    assert order == [first, second]


def test_unregister_stops_delivery():
    hub = EventBroadcaster()
    listener = Recorder("hit")
    hub.register_listener(listener)
    hub.unregister_listener(listener)
    hub.broadcast("hit", {"x": 1})
    assert listener.received == []
    assert hub.listeners == ()


def test_unregister_unknown_raises():
    hub = EventBroadcaster()
    with pytest.raises(ValueError):
        hub.unregister_listener(Recorder("hit"))


def test_unregister_all_listeners():
    hub = EventBroadcaster()
    listeners = [Recorder("a"), Recorder("b")]
    for listener in listeners:
        hub.register_listener(listener)
    hub.unregister_all_listeners()
    hub.broadcast("a")
    hub.broadcast("b")
    assert all(listener.received == [] for listener in listeners)
    assert hub.listeners == ()


def test_listener_may_unregister_during_broadcast():
    hub = EventBroadcaster()

    class OneShot(Recorder):
        def on_event_trigger(self, parameters):
            super().on_event_trigger(parameters)
            hub.unregister_listener(self)

    once, other = OneShot("k"), Recorder("k")
    hub.register_listener(once)
    hub.register_listener(other)
    hub.broadcast("k")
    hub.broadcast("k")
    assert len(once.received) == 1
    assert len(other.received) == 2