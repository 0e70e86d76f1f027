from dataclasses import dataclass

from clinica_core.core.application.cqrs import QueryDTO


@dataclass(frozen=True, slots=True)
class GetAvailableSlotsQuery(QueryDTO):
    """
    Horários livres de um profissional em uma data (YYYY-MM-DD).
    - clinic_id: quando informado, o profissional precisa pertencer à clínica.
    """
    professional_id: str
    date: str
    clinic_id: str | None = None
