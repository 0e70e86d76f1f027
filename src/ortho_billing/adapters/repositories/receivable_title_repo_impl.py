from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.utils import timezone

from ortho_billing.core.domain.entities.receivable_title_entity import (
    STATUS_PAID,
    ReceivableTitleEntity,
)
from ortho_billing.core.domain.repositories.receivable_title_repository import (
    ReceivableTitleRepository,
)
from plugins.django_interface.models import ReceivableTitle as TitleModel

INSERT_FIELDS = (
    "id",
    "clinic_id",
    "patient_id",
    "ortho_case_id",
    "amount",
    "balance",
    "due_date",
    "status",
    "origin",
    "notes",
    "installment_number",
    "total_installments",
    "payment_method",
)


class ReceivableTitleRepoImpl(ReceivableTitleRepository):
    def exists_for_case(self, case_id: str) -> bool:
        return TitleModel.objects.filter(ortho_case_id=case_id).exists()

    def add_many(self, titles: Sequence[ReceivableTitleEntity]) -> int:
        objs = [TitleModel(**{f: getattr(t, f) for f in INSERT_FIELDS}) for t in titles]
        return len(TitleModel.objects.bulk_create(objs))

    def update_future_unpaid_amount(self, case_id: str, today: date, amount: Decimal) -> int:
        return (
            TitleModel.objects
            .filter(ortho_case_id=case_id, due_date__gte=today)
            .exclude(status=STATUS_PAID)
            .update(amount=amount, balance=amount, updated_at=timezone.now())
        )

    def list_by_case(self, case_id: str) -> list[ReceivableTitleEntity]:
        qs = TitleModel.objects.filter(ortho_case_id=case_id).order_by("installment_number", "due_date")
        return [ReceivableTitleEntity.from_model(m) for m in qs]

    def lock_for_update(self, title_id: str, clinic_id: str | None = None) -> ReceivableTitleEntity | None:
        qs = TitleModel.objects.select_for_update()
        if clinic_id:
            qs = qs.filter(clinic_id=clinic_id)
        try:
            m = qs.filter(id=title_id).first()
        except ValidationError:
            return None
        return ReceivableTitleEntity.from_model(m) if m else None

    def apply_payment(self, title_id: str, balance: Decimal, status: str, payment_method: str) -> None:
        TitleModel.objects.filter(id=title_id).update(
            balance=balance,
            status=status,
            payment_method=payment_method,
            updated_at=timezone.now(),
        )
