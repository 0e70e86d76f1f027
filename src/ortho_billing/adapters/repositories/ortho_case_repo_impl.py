from decimal import Decimal

from django.core.exceptions import ValidationError
from django.utils import timezone

from ortho_billing.core.domain.entities.ortho_case_entity import OrthoCaseEntity
from ortho_billing.core.domain.repositories.ortho_case_repository import OrthoCaseRepository
from plugins.django_interface.models import OrthoCase as OrthoCaseModel
from plugins.django_interface.models import Patient, Professional

CREATE_FIELDS = (
    "id",
    "clinic_id",
    "patient_id",
    "professional_id",
    "tipo_tratamento",
    "data_inicio",
    "valor_total",
    "valor_entrada",
    "valor_mensalidade",
    "dia_vencimento",
    "total_meses",
    "status",
    "observacoes",
)


class OrthoCaseRepoImpl(OrthoCaseRepository):
    def _first(self, qs, case_id: str, clinic_id: str | None) -> OrthoCaseEntity | None:
        if clinic_id:
            qs = qs.filter(clinic_id=clinic_id)
        try:
            m = qs.filter(id=case_id).first()
        except ValidationError:
            return None
        return OrthoCaseEntity.from_model(m) if m else None

    def find_by_id(self, case_id: str, clinic_id: str | None = None) -> OrthoCaseEntity | None:
        return self._first(OrthoCaseModel.objects.all(), case_id, clinic_id)

    def lock_for_update(self, case_id: str, clinic_id: str | None = None) -> OrthoCaseEntity | None:
        return self._first(OrthoCaseModel.objects.select_for_update(), case_id, clinic_id)

    def list_active_ids(self, clinic_id: str) -> list[str]:
        qs = (
            OrthoCaseModel.objects
            .filter(clinic_id=clinic_id, status=OrthoCaseModel.Status.ATIVO)
            .order_by("created_at")
            .values_list("id", flat=True)
        )
        return [str(pk) for pk in qs]

    def update_monthly_amount(self, case_id: str, amount: Decimal) -> None:
        OrthoCaseModel.objects.filter(id=case_id).update(
            valor_mensalidade=amount,
            updated_at=timezone.now(),
        )

    def add(self, entity: OrthoCaseEntity) -> OrthoCaseEntity:
        m = OrthoCaseModel.objects.create(**{f: getattr(entity, f) for f in CREATE_FIELDS})
        return OrthoCaseEntity.from_model(m)

    def patient_in_clinic(self, patient_id: str, clinic_id: str) -> bool:
        return Patient.objects.filter(id=patient_id, clinic_id=clinic_id).exists()

    def professional_in_clinic(self, professional_id: str, clinic_id: str) -> bool:
        return Professional.objects.filter(id=professional_id, clinic_id=clinic_id).exists()

    def list_cases(self, clinic_id: str | None = None, status: str | None = None) -> list[OrthoCaseEntity]:
        qs = OrthoCaseModel.objects.order_by("-created_at")
        if clinic_id:
            qs = qs.filter(clinic_id=clinic_id)
        if status:
            qs = qs.filter(status=status)
        return [OrthoCaseEntity.from_model(m) for m in qs]
