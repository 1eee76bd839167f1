"""
Tests for EventSource and Composition change notification.
"""
import pytest

from lottie_builder import EventSource, ObjectType


class TestEventSource:

    def test_trigger_passes_arguments(self):
        received = []
        event = EventSource('test')
        event.subscribe(lambda *args: received.append(args))
        event.trigger(1, 'two')
        assert received == [(1, 'two')]

    def test_subscription_order(self):
        order = []
        event = EventSource()
        event.subscribe(lambda: order.append('first'))
        event.subscribe(lambda: order.append('second'))
        event.trigger()
        assert order == ['first', 'second']

    def test_unsubscribe(self):
        received = []
        event = EventSource()
        unsubscribe = event.subscribe(lambda: received.append(True))
        assert len(event) == 1
        unsubscribe()
        unsubscribe()
        event.trigger()
        assert received == []
        assert len(event) == 0

    def test_unsubscribe_during_trigger(self):
        received = []
        event = EventSource()
        unsubscribe_second = None

        def first():
            received.append('first')
            unsubscribe_second()

        event.subscribe(first)
        unsubscribe_second = event.subscribe(lambda: received.append('second'))
        event.trigger()
        assert received == ['first']

    def test_clear(self):
        event = EventSource()
        unsubscribe = event.subscribe(lambda: None)
        event.clear()
        assert len(event) == 0
        unsubscribe()

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            EventSource().subscribe('listener')

    def test_listener_error_propagates(self):
        event = EventSource()

        def broken():
            raise RuntimeError('listener failed')

        event.subscribe(broken)
        with pytest.raises(RuntimeError):
            event.trigger()


class TestCompositionEvents:

    def test_notify_source_change(self, comp, source_changes):
        comp.notify_source_change()
        assert source_changes == [True]

    def test_object_change_payload(self, comp):
        received = []
        comp.on_object_change.subscribe(lambda kind, obj: received.append((kind, obj)))
        layer = comp.get_layer('MyRect')
        layer.set_position_xy(1, 1)
        assert received == [(ObjectType.LAYER, layer)]

    def test_listener_sees_committed_document(self, comp):
        seen = []
        comp.on_source_change.subscribe(lambda: seen.append(len(comp.get_animation_object()['layers'])))
        comp.add_layer({'ty': 3})
        assert seen == [5]
