from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from clinica_core.core.domain.entities._base import EntityMixin


@dataclass(slots=True)
class PaymentEntity(EntityMixin):
    title_id: uuid.UUID
    patient_id: uuid.UUID
    payment_date: datetime
    payment_method: str
    value: Decimal
    notes: str | None = None
    created_by: uuid.UUID | None = None
    status: str = "completed"
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime | None = None
