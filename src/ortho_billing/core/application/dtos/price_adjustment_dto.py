from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator


class PriceAdjustmentDTO(BaseModel):
    """
    Corpo de POST /api/ortho/price-adjustment/.

    individual → `ortho_case_id` + (`valor_fixo_novo` ou `percentual_reajuste`)
    bulk       → `clinic_id` + `percentual_reajuste` (casos com status "ativo")
    """
    mode: Literal["individual", "bulk"]
    ortho_case_id: UUID | None = None
    clinic_id: UUID | None = None
    percentual_reajuste: Decimal | None = Field(default=None, gt=-100)
    valor_fixo_novo: Decimal | None = Field(default=None, gt=0)

    @field_validator("percentual_reajuste", "valor_fixo_novo", mode="before")
    @classmethod
    def _zero_as_absent(cls, v):
        # 0 e vazio equivalem a "não informado"
        if v is None or v == "":
            return None
        try:
            if Decimal(str(v)) == 0:
                return None
        except (InvalidOperation, ValueError):
            pass
        return v

    @model_validator(mode="after")
    def _check_mode_fields(self) -> PriceAdjustmentDTO:
        if self.mode == "individual":
            if self.ortho_case_id is None:
                raise ValueError("ortho_case_id é obrigatório no modo individual")
            if not self.percentual_reajuste and not self.valor_fixo_novo:
                raise ValueError("percentual_reajuste ou valor_fixo_novo é obrigatório")
        else:
            if self.clinic_id is None:
                raise ValueError("clinic_id é obrigatório no modo bulk")
            if not self.percentual_reajuste:
                raise ValueError("percentual_reajuste é obrigatório no modo bulk")
        return self


class PriceAdjustmentResultDTO(BaseModel):
    cases_updated: int = Field(0, serialization_alias="casesUpdated")
    titles_updated: int = Field(0, serialization_alias="titulosUpdated")
    novo_valor: Decimal | None = Field(None, serialization_alias="novoValor")
    message: str | None = None
