#Purpose: minimal event subscription used by the map surface and its controls.
#Listeners are called synchronously, in the order they subscribed.

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], Any]


class EventEmitter:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event: str, callback: Listener) -> None:
        self._listeners.setdefault(event, []).append(callback)

    def off(self, event: str, callback: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def fire(self, event: str, payload: Dict[str, Any] | None = None) -> None:
        payload = payload or {}
        listeners = list(self._listeners.get(event, []))  #copy so listeners may unsubscribe
        logger.debug(f"fire {event} -> {len(listeners)} listener(s)")
        for callback in listeners:
            callback(payload)
