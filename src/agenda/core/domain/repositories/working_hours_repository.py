from abc import ABC, abstractmethod
from typing import Any

from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity


class WorkingHoursRepository(ABC):
    @abstractmethod
    def professional_clinic_id(self, professional_id: str) -> str | None:
        """Clínica do profissional, ou None se ele não existe."""
        ...

    @abstractmethod
    def find_professional_day(self, professional_id: str, dia_semana: int) -> WorkingHoursEntity | None:
        """Agenda do profissional no dia da semana (0 = domingo)."""
        ...

    @abstractmethod
    def find_clinic_business_hours(self, clinic_id: str) -> dict[str, Any] | None:
        """JSON bruto de horário de funcionamento da clínica."""
        ...
