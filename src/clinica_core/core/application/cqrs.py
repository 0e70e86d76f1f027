from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

import structlog

# ───────────────────────────────────────────────
# CQRS: mensagens, handlers e buses com log de duração
# ───────────────────────────────────────────────

C = TypeVar('C')  # Command type
Q = TypeVar('Q')  # Query filtros type
R = TypeVar('R')  # Query result type

logger = structlog.get_logger(__name__)


# ───────────────────────────────────────────────
# Mensagens
# ───────────────────────────────────────────────
@dataclass(frozen=True)
class CommandDTO:
    """Base dos comandos de escrita."""


@dataclass(frozen=True)
class QueryDTO(Generic[Q]):
    """Base das consultas de leitura; `filtros` fica livre para cada query."""
    filtros: Q


# ───────────────────────────────────────────────
# Handlers
# ───────────────────────────────────────────────
class CommandHandler(Protocol, Generic[C]):
    def handle(self, command: C) -> Any:
        ...


class QueryHandler(Protocol, Generic[Q, R]):
    def handle(self, query: Q) -> R:
        ...


# ───────────────────────────────────────────────
# Buses
# ───────────────────────────────────────────────
class _Bus:
    kind = "message"

    def __init__(self) -> None:
        self._handlers: dict[type, Any] = {}

    def register(self, message_type: type, handler: Any) -> None:
        self._handlers[message_type] = handler
        logger.debug("cqrs.handler_registered", kind=self.kind, message=message_type.__name__)

    def dispatch(self, message: Any) -> Any:
        name = type(message).__name__
        handler = self._handlers.get(type(message))
        if handler is None:
            raise LookupError(f"Nenhum handler registrado para {self.kind}: {name}")

        start = time.perf_counter()
        result = handler.handle(message)
        logger.info(
            "cqrs.dispatched",
            kind=self.kind,
            message=name,
            duration=f"{time.perf_counter() - start:.3f}s",
        )
        return result


class CommandBus(_Bus):
    kind = "command"


class QueryBus(_Bus):
    kind = "query"


class CommandBusImpl(CommandBus):
    pass


class QueryBusImpl(QueryBus):
    pass
