"""
Purpose: UI controls shown next to the map.
What it does:
- Tracks visibility of the "add point" and "reset" controls.
- Dispatches control clicks to subscribed handlers.
- Collects user-visible notices (e.g. a failed route request).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List

from .events import EventEmitter

logger = logging.getLogger(__name__)

ADD_POINT = "add_point"
RESET = "reset"

_LOG_LEVELS = {
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class UserNotice:
    level: str
    message: str
    created_at: datetime = field(default_factory=datetime.now)


class ControlPanel:
    """
    Initial state matches a fresh page load: "add point" visible, "reset" hidden.
    """
    def __init__(self):
        self._visible: Dict[str, bool] = {ADD_POINT: True, RESET: False}
        self._clicks = EventEmitter()
        self._notices: List[UserNotice] = []

    def show(self, name: str) -> None:
        self._check(name)
        self._visible[name] = True

    def hide(self, name: str) -> None:
        self._check(name)
        self._visible[name] = False

    def is_visible(self, name: str) -> bool:
        self._check(name)
        return self._visible[name]

    def on_click(self, name: str, handler: Callable[[], object]) -> None:
        self._check(name)
        self._clicks.on(name, lambda _payload: handler())

    def click(self, name: str) -> None:
        if not self.is_visible(name):
            logger.debug(f"ignored click on hidden control {name}")
            return
        self._clicks.fire(name)

    #----------------
    # notices
    #----------------
    def notify(self, level: str, message: str) -> UserNotice:
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unknown notice level: {level}")
        notice = UserNotice(level=level, message=message)
        self._notices.append(notice)
        logger.log(_LOG_LEVELS[level], f"notice: {message}")
        return notice

    @property
    def notices(self) -> List[UserNotice]:
        return list(self._notices)

    def clear_notices(self) -> None:
        self._notices.clear()

    def _check(self, name: str) -> None:
        if name not in self._visible:
            raise KeyError(f"Unknown control: {name}")
