from __future__ import annotations

from dataclasses import dataclass
from datetime import time


def to_minutes(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True, slots=True)
class WorkingHoursEntity:
    """
    Configuração de atendimento de um dia: expediente, almoço opcional e
    duração do slot. Vem da agenda do profissional ou, na falta dela, do
    horário de funcionamento da clínica.
    """
    start: time
    end: time
    slot_interval_minutes: int
    lunch_start: time | None = None
    lunch_end: time | None = None
    active: bool = True

    @property
    def start_minute(self) -> int:
        return to_minutes(self.start)

    @property
    def end_minute(self) -> int:
        return to_minutes(self.end)

    @property
    def lunch_range(self) -> range | None:
        if self.lunch_start is None or self.lunch_end is None:
            return None
        return range(to_minutes(self.lunch_start), to_minutes(self.lunch_end))

    def __post_init__(self):
        if self.slot_interval_minutes <= 0:
            raise ValueError(f"Intervalo de slot inválido: {self.slot_interval_minutes}")
