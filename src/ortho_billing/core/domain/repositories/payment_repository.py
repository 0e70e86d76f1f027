from abc import ABC, abstractmethod

from ortho_billing.core.domain.entities.payment_entity import PaymentEntity


class PaymentRepository(ABC):
    @abstractmethod
    def add(self, payment: PaymentEntity) -> PaymentEntity:
        ...
