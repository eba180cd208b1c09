"""Current quote batch and error message, with change notification."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from threading import Lock

from ..models import Quote, QuoteState

logger = logging.getLogger(__name__)

Observer = Callable[[QuoteState], None]


class QuoteStore:
    """Holds the displayed quotes and the latest load error.

    The batch and the error change independently. Observers receive the new
    snapshot after every change, outside the lock.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._state = QuoteState()
        self._observers: list[Observer] = []

    @property
    def state(self) -> QuoteState:
        with self._lock:
            return self._state

    @property
    def quotes(self) -> tuple[Quote, ...]:
        return self.state.quotes

    @property
    def error(self) -> str | None:
        return self.state.error

    def subscribe(self, observer: Observer) -> None:
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def publish_quotes(self, quotes: Iterable[Quote]) -> None:
        """Replace the displayed batch. An empty batch is a normal result."""
        batch = tuple(quotes)
        with self._lock:
            state = QuoteState(quotes=batch, error=self._state.error)
            self._state = state
        self._notify(state)

    def publish_error(self, message: str) -> None:
        """Set the user-visible error; the batch is left as it was."""
        with self._lock:
            state = QuoteState(quotes=self._state.quotes, error=message)
            self._state = state
        self._notify(state)

    def clear_error(self) -> None:
        with self._lock:
            if self._state.error is None:
                return
            state = QuoteState(quotes=self._state.quotes, error=None)
            self._state = state
        self._notify(state)

    def _notify(self, state: QuoteState) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            try:
                observer(state)
            except Exception as e:
                logger.error("Quote store observer failed: %s", e)
