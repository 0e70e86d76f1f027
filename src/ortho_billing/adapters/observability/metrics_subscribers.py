from clinica_core.adapters.observability.metrics import (
    INSTALLMENTS_GENERATED,
    PAYMENTS_RECORDED,
    TITLES_ADJUSTED,
)
from clinica_core.core.domain.services.event_dispatcher import EventDispatcher
from ortho_billing.core.domain.events.ortho_events import (
    InstallmentsGeneratedEvent,
    PaymentRecordedEvent,
    PricesAdjustedEvent,
)


def on_installments_generated(evt: InstallmentsGeneratedEvent) -> None:
    INSTALLMENTS_GENERATED.inc(evt.count)


def on_prices_adjusted(evt: PricesAdjustedEvent) -> None:
    TITLES_ADJUSTED.labels(mode=evt.mode).inc(evt.titles_updated)


def on_payment_recorded(evt: PaymentRecordedEvent) -> None:
    PAYMENTS_RECORDED.labels(method=evt.method).inc()


def register_metrics_subscribers(dispatcher: EventDispatcher) -> None:
    dispatcher.subscribe(InstallmentsGeneratedEvent, on_installments_generated)
    dispatcher.subscribe(PricesAdjustedEvent, on_prices_adjusted)
    dispatcher.subscribe(PaymentRecordedEvent, on_payment_recorded)
