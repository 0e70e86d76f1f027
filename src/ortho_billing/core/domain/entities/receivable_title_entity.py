from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from clinica_core.core.domain.entities._base import EntityMixin

STATUS_OPEN = "open"
STATUS_PARTIAL = "partial"
STATUS_PAID = "paid"
STATUS_CANCELLED = "cancelled"


@dataclass(slots=True)
class ReceivableTitleEntity(EntityMixin):
    """Parcela (ou cobrança avulsa) a receber de um paciente."""
    clinic_id: uuid.UUID
    patient_id: uuid.UUID
    amount: Decimal
    balance: Decimal
    due_date: date
    ortho_case_id: uuid.UUID | None = None
    status: str = STATUS_OPEN
    origin: str | None = None
    notes: str | None = None
    installment_number: int | None = None
    total_installments: int | None = None
    payment_method: str | None = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_closed(self) -> bool:
        return self.status in (STATUS_PAID, STATUS_CANCELLED)
