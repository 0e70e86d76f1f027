from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field


class CreateOrthoCaseDTO(BaseModel):
    patient_id: UUID
    data_inicio: date
    clinic_id: UUID | None = None
    professional_id: UUID | None = None
    tipo_tratamento: str = "aparelho_fixo"
    valor_total: Decimal = Field(Decimal("0"), ge=0)
    valor_entrada: Decimal | None = Field(None, ge=0)
    valor_mensalidade: Decimal | None = Field(None, ge=0)
    dia_vencimento: int | None = Field(None, ge=1, le=31)
    total_meses: int | None = Field(None, ge=1)
    observacoes: str | None = None


class GeneratedInstallmentsDTO(BaseModel):
    ortho_case_id: str
    count: int
