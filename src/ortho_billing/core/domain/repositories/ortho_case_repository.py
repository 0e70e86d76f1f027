from abc import ABC, abstractmethod
from decimal import Decimal

from ortho_billing.core.domain.entities.ortho_case_entity import OrthoCaseEntity


class OrthoCaseRepository(ABC):
    @abstractmethod
    def find_by_id(self, case_id: str, clinic_id: str | None = None) -> OrthoCaseEntity | None:
        """Busca o caso; com `clinic_id`, casos de outra clínica não são visíveis."""
        ...

    @abstractmethod
    def lock_for_update(self, case_id: str, clinic_id: str | None = None) -> OrthoCaseEntity | None:
        """
        Igual a `find_by_id`, mas trava a linha até o fim da transação
        corrente (SELECT ... FOR UPDATE). Deve ser chamado dentro de
        `transaction.atomic()`.
        """
        ...

    @abstractmethod
    def list_active_ids(self, clinic_id: str) -> list[str]:
        ...

    @abstractmethod
    def update_monthly_amount(self, case_id: str, amount: Decimal) -> None:
        ...

    @abstractmethod
    def add(self, entity: OrthoCaseEntity) -> OrthoCaseEntity:
        ...

    @abstractmethod
    def patient_in_clinic(self, patient_id: str, clinic_id: str) -> bool:
        ...

    @abstractmethod
    def professional_in_clinic(self, professional_id: str, clinic_id: str) -> bool:
        ...

    @abstractmethod
    def list_cases(self, clinic_id: str | None = None, status: str | None = None) -> list[OrthoCaseEntity]:
        """Casos mais recentes primeiro; filtros vazios não restringem."""
        ...
