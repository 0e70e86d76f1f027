"""Buses de comando e consulta."""
from dataclasses import dataclass

from django.test import SimpleTestCase

from clinica_core.core.application.cqrs import (
    CommandBusImpl,
    CommandDTO,
    QueryBusImpl,
    QueryDTO,
)


@dataclass(frozen=True)
class Ping(CommandDTO):
    value: int


@dataclass(frozen=True)
class Lookup(QueryDTO):
    key: str = ""


class EchoHandler:
    def __init__(self):
        self.received = []

    def handle(self, message):
        self.received.append(message)
        return message


class CommandBusTests(SimpleTestCase):
    def test_routes_to_registered_handler_and_returns_its_result(self):
        bus, handler = CommandBusImpl(), EchoHandler()
        bus.register(Ping, handler)

        result = bus.dispatch(Ping(value=3))

        self.assertEqual(result, Ping(value=3))
        self.assertEqual(handler.received, [Ping(value=3)])

    def test_unregistered_command(self):
        with self.assertRaisesMessage(LookupError, "command: Ping"):
            CommandBusImpl().dispatch(Ping(value=1))


class QueryBusTests(SimpleTestCase):
    def test_routes_by_exact_type(self):
        bus = QueryBusImpl()
        bus.register(Lookup, EchoHandler())

        self.assertEqual(bus.dispatch(Lookup(filtros={}, key="a")).key, "a")
        with self.assertRaises(LookupError):
            bus.dispatch(Ping(value=1))
