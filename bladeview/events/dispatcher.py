"""
Event Dispatcher - simple synchronous in-process events
View composers and creators are registered as listeners on
'composing: <view>' and 'creating: <view>' events.
"""
from typing import Any, Callable, Dict, List, Union

from bladeview.logging import getLogger
from bladeview.support.str import Str

Listener = Callable[..., Any]


class Dispatcher:
    """
    Synchronous event dispatcher with wildcard listeners

    Listeners are called in registration order: exact listeners first, then
    wildcard listeners whose pattern matches the event name. Listener
    exceptions propagate to the dispatcher's caller.

    Example:
        events = Dispatcher()
        events.listen('composing: admin.*', lambda view: view.with_('menu', menu))
        events.dispatch('composing: admin.users', view)
    """

    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}
        self._wildcards: Dict[str, List[Listener]] = {}
        self._logger = getLogger(__name__)

    def listen(self, events: Union[str, List[str]], listener: Listener) -> None:
        """Register listener for one or more event names (or wildcard patterns)"""
        if isinstance(events, str):
            events = [events]

        for event in events:
            if '*' in event or '?' in event or '[' in event:
                self._wildcards.setdefault(event, []).append(listener)
            else:
                self._listeners.setdefault(event, []).append(listener)
            self._logger.debug(f"Registered listener for {event}")

    def has_listeners(self, event: str) -> bool:
        """Check if any listener (exact or wildcard) would receive event"""
        return bool(self.get_listeners(event))

    def get_listeners(self, event: str) -> List[Listener]:
        """Get every listener for event, exact listeners first"""
        listeners = list(self._listeners.get(event, []))

        for pattern, wildcard_listeners in self._wildcards.items():
            if Str.is_(pattern, event):
                listeners.extend(wildcard_listeners)

        return listeners

    def dispatch(self, event: str, *payload: Any) -> List[Any]:
        """
        Call every listener for event with payload

        Returns:
            List of listener return values
        """
        return [listener(*payload) for listener in self.get_listeners(event)]

    def get_registered_listeners(self) -> Dict[str, int]:
        """Get count of registered listeners by event name (for debugging)"""
        counts = {event: len(items) for event, items in self._listeners.items()}
        counts.update({event: len(items) for event, items in self._wildcards.items()})
        return counts
