from dataclasses import dataclass

from clinica_core.core.application.cqrs import CommandDTO
from ortho_billing.core.application.dtos.ortho_case_dto import CreateOrthoCaseDTO
from ortho_billing.core.application.dtos.payment_dto import RecordPaymentDTO
from ortho_billing.core.application.dtos.price_adjustment_dto import PriceAdjustmentDTO


@dataclass(frozen=True, slots=True)
class GenerateInstallmentsCommand(CommandDTO):
    """`clinic_id` restringe o caso à clínica do usuário (None = admin)."""
    ortho_case_id: str
    user_id: str | None = None
    clinic_id: str | None = None


@dataclass(frozen=True, slots=True)
class AdjustPricesCommand(CommandDTO):
    payload: PriceAdjustmentDTO
    user_id: str | None = None
    clinic_id: str | None = None


@dataclass(frozen=True, slots=True)
class CreateOrthoCaseCommand(CommandDTO):
    payload: CreateOrthoCaseDTO
    clinic_id: str
    user_id: str | None = None


@dataclass(frozen=True, slots=True)
class RecordPaymentCommand(CommandDTO):
    title_id: str
    payload: RecordPaymentDTO
    user_id: str | None = None
    clinic_id: str | None = None
