from abc import ABC, abstractmethod
from datetime import date

from agenda.core.domain.entities.booking_entity import BookingEntity


class BookingRepository(ABC):
    @abstractmethod
    def list_for_day(self, professional_id: str, day: date) -> list[BookingEntity]:
        """
        Agendamentos não cancelados do profissional no dia, com início
        convertido para o fuso local.
        """
        ...
