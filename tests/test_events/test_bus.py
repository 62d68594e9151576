"""Tests for the message bus."""

from localscope.events import ComposedEdge, MessageBus, ScopedBinding, ValueBinding


class TestLog:
    def test_append_and_snapshot(self):
        bus = MessageBus()
        bus.append(ValueBinding(name="a", value="1"))
        snapshot = bus.messages
        bus.append(ValueBinding(name="b", value="2"))
        assert len(snapshot) == 1
        assert len(bus) == 2

    def test_of_type_filters_in_order(self):
        bus = MessageBus([
            ComposedEdge(name="a", value="b"),
            ScopedBinding(name="a", value="_a"),
            ComposedEdge(name="a", value="c"),
        ])
        assert [m.value for m in bus.of_type(ComposedEdge)] == ["b", "c"]

    def test_find(self):
        bus = MessageBus([ScopedBinding(name="a", value="_a"), ScopedBinding(name="a", value="_b")])
        assert bus.find(ScopedBinding, "a").value == "_a"
        assert bus.find(ScopedBinding, "missing") is None
        assert bus.find(ValueBinding, "a") is None


class TestListeners:
    def test_subscribe_by_type(self):
        bus = MessageBus()
        received: list[object] = []
        bus.subscribe(ScopedBinding, received.append)
        bus.append(ValueBinding(name="x", value="1"))
        bus.append(ScopedBinding(name="x", value="_x"))
        assert received == [ScopedBinding(name="x", value="_x")]

    def test_on_all(self):
        bus = MessageBus()
        received: list[object] = []
        bus.on_all(received.append)
        bus.extend([ValueBinding(name="x", value="1"), ComposedEdge(name="x", value="y")])
        assert len(received) == 2

    def test_seed_messages_are_not_dispatched(self):
        received: list[object] = []
        bus = MessageBus([ValueBinding(name="x", value="1")])
        bus.on_all(received.append)
        assert received == []
