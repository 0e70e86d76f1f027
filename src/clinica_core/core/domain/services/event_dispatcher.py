from collections import defaultdict
from collections.abc import Callable

import structlog

from clinica_core.core.domain.events.events import DomainEvent

logger = structlog.get_logger(__name__)

Subscriber = Callable[[DomainEvent], None]


def _name(subscriber: Subscriber) -> str:
    return getattr(subscriber, "__name__", repr(subscriber))


class EventDispatcher:
    """
    Publica eventos de domínio para os assinantes do tipo exato do evento.

    O evento é publicado depois do commit do comando: um assinante que
    falha é logado e os seguintes continuam recebendo o evento.
    """
    def __init__(self) -> None:
        self._subscribers: defaultdict[type[DomainEvent], list[Subscriber]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], subscriber: Subscriber) -> None:
        self._subscribers[event_type].append(subscriber)
        logger.debug("event.subscribed", event_type=event_type.__name__, subscriber=_name(subscriber))

    def dispatch(self, event: DomainEvent) -> None:
        event_name = type(event).__name__
        subscribers = tuple(self._subscribers.get(type(event), ()))
        logger.debug(
            "event.dispatch",
            event_name=event_name,
            event_id=str(event.event_id),
            listeners=len(subscribers),
        )
        for subscriber in subscribers:
            try:
                subscriber(event)
            except Exception:
                logger.exception("event.subscriber_error", event_name=event_name, subscriber=_name(subscriber))
