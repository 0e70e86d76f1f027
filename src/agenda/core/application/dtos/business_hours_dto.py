from __future__ import annotations

from datetime import time

from pydantic import BaseModel, Field

from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity

# índice = dia_semana (0 = domingo), mesma convenção da agenda do profissional
DAY_KEYS = ("domingo", "segunda", "terca", "quarta", "quinta", "sexta", "sabado")


class DayHoursDTO(BaseModel):
    ativo: bool = False
    inicio: time | None = None
    fim: time | None = None
    almoco_inicio: time | None = None
    almoco_fim: time | None = None


class BusinessHoursDTO(BaseModel):
    """JSON `horario_funcionamento` das configurações da clínica."""
    intervalo_padrao: int = Field(default=30, gt=0)
    dias: dict[str, DayHoursDTO] = Field(default_factory=dict)

    def for_weekday(self, dia_semana: int) -> WorkingHoursEntity | None:
        day = self.dias.get(DAY_KEYS[dia_semana])
        if day is None or day.inicio is None or day.fim is None:
            return None
        return WorkingHoursEntity(
            start=day.inicio,
            end=day.fim,
            lunch_start=day.almoco_inicio,
            lunch_end=day.almoco_fim,
            slot_interval_minutes=self.intervalo_padrao,
            active=day.ativo,
        )
