"""
Event Source - synchronous listener registry

Used by Composition to announce committed mutations:
- on_source_change: something in the document changed (no payload)
- on_object_change: a specific object changed (object_type, obj)

Listeners run in subscription order on the caller's thread. A listener
that raises aborts the trigger and the exception reaches the mutator.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List

_logger = logging.getLogger('EventSource')


@dataclass
class _Subscription:
    """Listener registration"""
    listener: Callable[..., Any]
    active: bool = True


class EventSource:
    """Listener registry for one event

    Example:
        changed = EventSource('source_change')
        unsubscribe = changed.subscribe(lambda: print("changed"))
        changed.trigger()
        unsubscribe()
    """

    def __init__(self, name: str = 'event'):
        self.name = name
        self._subscriptions: List[_Subscription] = []

    def __len__(self) -> int:
        """Number of active listeners"""
        return len(self._subscriptions)

    def subscribe(self, listener: Callable[..., Any]) -> Callable[[], None]:
        """Register a listener

        Args:
            listener: Callable invoked with the trigger arguments

        Returns:
            Function that removes this listener (safe to call twice)
        """
        if not callable(listener):
            raise TypeError(f"Expected callable listener, got {type(listener)}")

        subscription = _Subscription(listener)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription.active:
                subscription.active = False
                self._subscriptions.remove(subscription)

        return unsubscribe

    def trigger(self, *args: Any) -> None:
        """Call every listener with args"""
        if not self._subscriptions:
            return
        _logger.debug(f"{self.name}: notifying {len(self._subscriptions)} listener(s)")
        # Copy so listeners may unsubscribe while being notified
        for subscription in list(self._subscriptions):
            if subscription.active:
                subscription.listener(*args)

    def clear(self) -> None:
        """Remove all listeners"""
        for subscription in self._subscriptions:
            subscription.active = False
        self._subscriptions.clear()
