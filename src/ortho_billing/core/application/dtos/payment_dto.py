from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


class RecordPaymentDTO(BaseModel):
    amount: Decimal = Field(gt=0)
    method: str = Field(min_length=1, max_length=50)
    paid_at: datetime | None = None
    notes: str | None = None


class RecordedPaymentDTO(BaseModel):
    payment_id: str
    title_id: str
    title_status: str
    title_balance: Decimal
