"""Listener registry with a closed event vocabulary."""

import asyncio
import logging
from collections import defaultdict
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Set, Type, Union

logger = logging.getLogger(__name__)

Listener = Callable[[Any], Any]


class EventEmitter:
    """
    Dispatches published events to registered listeners.

    Only names from ``vocabulary`` can be subscribed to or emitted.
    Listeners run in registration order; coroutine listeners are scheduled
    on the running loop. A listener that raises is logged and skipped.
    """

    def __init__(self, vocabulary: Type[Enum]):
        self.vocabulary = vocabulary
        self._listeners: Dict[Enum, List[Listener]] = defaultdict(list)
        self._pending: Set[asyncio.Task] = set()

    def _resolve(self, event: Union[str, Enum]) -> Enum:
        try:
            return self.vocabulary(event.value if isinstance(event, Enum) else event)
        except ValueError:
            allowed = ", ".join(e.value for e in self.vocabulary)
            raise ValueError(f"Unknown event {event!r}; expected one of: {allowed}") from None

    def on(self, event: Union[str, Enum], listener: Optional[Listener] = None):
        """
        Register ``listener`` for ``event``.

        Can also be used as a decorator: ``@socket.on(TradeEvent.SEND_TRADE)``.
        """
        name = self._resolve(event)

        def register(fn: Listener) -> Listener:
            self._listeners[name].append(fn)
            return fn

        if listener is None:
            return register
        return register(listener)

    def off(self, event: Union[str, Enum], listener: Listener) -> None:
        """Remove one registration of ``listener``; unknown listeners are ignored."""
        name = self._resolve(event)
        try:
            self._listeners[name].remove(listener)
        except ValueError:
            pass

    def listeners(self, event: Union[str, Enum]) -> List[Listener]:
        return list(self._listeners[self._resolve(event)])

    def emit(self, event: Union[str, Enum], data: Any = None) -> int:
        """Call every listener of ``event`` with ``data``; returns how many ran."""
        name = self._resolve(event)
        called = 0

        for listener in list(self._listeners[name]):
            try:
                result = listener(data)
                if asyncio.iscoroutine(result):
                    task = asyncio.ensure_future(self._run_async(name, result))
                    self._pending.add(task)
                    task.add_done_callback(self._pending.discard)
                called += 1
            except Exception as e:
                logger.error(f"Listener error for {name.value}: {e}", exc_info=True)

        return called

    @staticmethod
    async def _run_async(name: Enum, coro) -> None:
        try:
            await coro
        except Exception as e:
            logger.error(f"Listener error for {name.value}: {e}", exc_info=True)
