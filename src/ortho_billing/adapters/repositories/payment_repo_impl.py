from ortho_billing.core.domain.entities.payment_entity import PaymentEntity
from ortho_billing.core.domain.repositories.payment_repository import PaymentRepository
from plugins.django_interface.models import Payment as PaymentModel


class PaymentRepoImpl(PaymentRepository):
    def add(self, payment: PaymentEntity) -> PaymentEntity:
        m = PaymentModel.objects.create(
            id=payment.id,
            title_id=payment.title_id,
            patient_id=payment.patient_id,
            payment_date=payment.payment_date,
            payment_method=payment.payment_method,
            value=payment.value,
            notes=payment.notes,
            created_by=payment.created_by,
            status=payment.status,
        )
        return PaymentEntity.from_model(m)
