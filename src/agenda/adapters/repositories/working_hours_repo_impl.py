from typing import Any

from django.core.exceptions import ValidationError

from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity
from agenda.core.domain.repositories.working_hours_repository import WorkingHoursRepository
from plugins.django_interface.models import ClinicSettings, Professional, ProfessionalScheduleConfig


class WorkingHoursRepoImpl(WorkingHoursRepository):
    def __init__(self, default_interval_minutes: int = 30):
        self.default_interval_minutes = default_interval_minutes

    def professional_clinic_id(self, professional_id: str) -> str | None:
        try:
            prof = Professional.objects.only("clinic_id").get(id=professional_id)
        except (Professional.DoesNotExist, ValidationError):
            return None
        return str(prof.clinic_id)

    def find_professional_day(self, professional_id: str, dia_semana: int) -> WorkingHoursEntity | None:
        cfg = ProfessionalScheduleConfig.objects.filter(
            professional_id=professional_id,
            dia_semana=dia_semana,
        ).first()
        if cfg is None:
            return None
        return WorkingHoursEntity(
            start=cfg.hora_inicio,
            end=cfg.hora_fim,
            lunch_start=cfg.almoco_inicio,
            lunch_end=cfg.almoco_fim,
            slot_interval_minutes=cfg.duracao_consulta_minutos or self.default_interval_minutes,
            active=cfg.ativo,
        )

    def find_clinic_business_hours(self, clinic_id: str) -> dict[str, Any] | None:
        row = ClinicSettings.objects.filter(clinic_id=clinic_id).values_list(
            "horario_funcionamento", flat=True
        ).first()
        return row or None
