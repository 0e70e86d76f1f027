from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from clinica_core.core.domain.entities._base import EntityMixin

STATUS_ATIVO = "ativo"


@dataclass(slots=True)
class OrthoCaseEntity(EntityMixin):
    id: uuid.UUID
    clinic_id: uuid.UUID
    patient_id: uuid.UUID
    data_inicio: date
    professional_id: uuid.UUID | None = None
    tipo_tratamento: str = "aparelho_fixo"
    valor_total: Decimal = Decimal("0")
    valor_entrada: Decimal | None = None
    valor_mensalidade: Decimal | None = None
    dia_vencimento: int | None = None
    total_meses: int | None = None
    status: str = STATUS_ATIVO
    observacoes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_active(self) -> bool:
        return self.status == STATUS_ATIVO

    @property
    def has_down_payment(self) -> bool:
        return self.valor_entrada is not None and self.valor_entrada > 0

    @property
    def has_billing_plan(self) -> bool:
        """Plano completo: mensalidade, quantidade de meses e dia de vencimento."""
        return bool(self.valor_mensalidade and self.total_meses and self.dia_vencimento)
