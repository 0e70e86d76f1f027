from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import date
from decimal import Decimal

from ortho_billing.core.domain.entities.receivable_title_entity import ReceivableTitleEntity


class ReceivableTitleRepository(ABC):
    @abstractmethod
    def exists_for_case(self, case_id: str) -> bool:
        ...

    @abstractmethod
    def add_many(self, titles: Sequence[ReceivableTitleEntity]) -> int:
        """Insere todos os títulos em um único lote; retorna quantos foram criados."""
        ...

    @abstractmethod
    def update_future_unpaid_amount(self, case_id: str, today: date, amount: Decimal) -> int:
        """
        Define `amount = balance = amount` nos títulos do caso com
        status diferente de `paid` e vencimento >= `today`.
        Retorna a quantidade de títulos alterados.
        """
        ...

    @abstractmethod
    def list_by_case(self, case_id: str) -> list[ReceivableTitleEntity]:
        ...

    @abstractmethod
    def lock_for_update(self, title_id: str, clinic_id: str | None = None) -> ReceivableTitleEntity | None:
        ...

    @abstractmethod
    def apply_payment(self, title_id: str, balance: Decimal, status: str, payment_method: str) -> None:
        ...
