from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from clinica_core.core.domain.events.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class InstallmentsGeneratedEvent(DomainEvent):
    ortho_case_id: str
    count: int


@dataclass(frozen=True, kw_only=True)
class PricesAdjustedEvent(DomainEvent):
    mode: str
    cases_updated: int
    titles_updated: int
    clinic_id: str | None = None
    ortho_case_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class PaymentRecordedEvent(DomainEvent):
    title_id: str
    payment_id: str
    amount: Decimal
    method: str
    title_status: str
