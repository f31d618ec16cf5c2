# ecommerce/infrastructure/event_dispatcher.py
import logging
from collections.abc import Iterator, Mapping

from ecommerce.domain.events import Event, EventHandler

logger = logging.getLogger(__name__)


class HandlersView(Mapping[str, tuple[EventHandler, ...]]):
    """Live read-only view of a dispatcher registry.

    Each lookup returns a tuple snapshot of the current handler list.
    """

    def __init__(self, handlers: dict[str, list[EventHandler]]):
        self._handlers = handlers

    def __getitem__(self, event_type: str) -> tuple[EventHandler, ...]:
        return tuple(self._handlers[event_type])

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


class EventDispatcher:
    """Synchronous in-process publish/subscribe for domain events.

    Handlers are kept per event type name in registration order. ``notify``
    calls every matching handler on the caller's stack before returning.
    If a handler raises, the remaining handlers are skipped and the error
    reaches the caller of ``notify``.

    The registry is not synchronised; guard the dispatcher externally when
    it is shared between threads.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    @property
    def event_handlers(self) -> Mapping[str, tuple[EventHandler, ...]]:
        return HandlersView(self._handlers)

    def register(self, event_type: str | type[Event], handler: EventHandler) -> None:
        key = self._key(event_type)
        self._handlers.setdefault(key, []).append(handler)
        logger.debug("Registered %s for %s", type(handler).__name__, key)

    def unregister(self, event_type: str | type[Event], handler: EventHandler) -> None:
        """Remove the first registration of this exact handler instance.

        The key is kept even when its list ends up empty.
        """
        handlers = self._handlers.get(self._key(event_type))
        if handlers is None:
            return
        for index, registered in enumerate(handlers):
            if registered is handler:
                del handlers[index]
                return

    def unregister_all(self) -> None:
        self._handlers.clear()

    def notify(self, event: Event) -> None:
        event_type = event.event_type
        handlers = self._handlers.get(event_type)
        if not handlers:
            return
        for handler in list(handlers):
            try:
                handler.handle(event)
            except Exception:
                logger.error(
                    "Handler %s failed on %s", type(handler).__name__, event_type
                )
                raise

    @staticmethod
    def _key(event_type: str | type[Event]) -> str:
        if isinstance(event_type, type):
            return event_type.__name__
        return event_type
