from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog
from pydantic import ValidationError

from agenda.core.application.dtos.available_slots_dto import AvailableSlotsDTO
from agenda.core.application.dtos.business_hours_dto import BusinessHoursDTO
from agenda.core.application.queries.available_slots_queries import GetAvailableSlotsQuery
from agenda.core.application.services.slot_availability import (
    compute_available_slots,
    resolve_working_hours,
)
from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity
from agenda.core.domain.repositories.booking_repository import BookingRepository
from agenda.core.domain.repositories.working_hours_repository import WorkingHoursRepository
from clinica_core.core.application.cqrs import QueryHandler
from clinica_core.core.domain.exceptions import InvalidInputError, NotFoundError

logger = structlog.get_logger(__name__)


class GetAvailableSlotsHandler(QueryHandler[GetAvailableSlotsQuery, AvailableSlotsDTO]):
    def __init__(
        self,
        working_hours_repo: WorkingHoursRepository,
        booking_repo: BookingRepository,
        clock: Callable[[], datetime],
    ):
        self.working_hours_repo = working_hours_repo
        self.booking_repo = booking_repo
        self.clock = clock

    def handle(self, q: GetAvailableSlotsQuery) -> AvailableSlotsDTO:
        try:
            day = datetime.strptime(q.date, "%Y-%m-%d").date()
        except (TypeError, ValueError):
            raise InvalidInputError("date deve estar no formato YYYY-MM-DD")  # noqa: B904
        iso_day = day.isoformat()

        clinic_id = self.working_hours_repo.professional_clinic_id(q.professional_id)
        if clinic_id is None or (q.clinic_id and clinic_id != str(q.clinic_id)):
            raise NotFoundError("Profissional não encontrado")

        dia_semana = (day.weekday() + 1) % 7
        prof_cfg = self.working_hours_repo.find_professional_day(q.professional_id, dia_semana)
        clinic_cfg = None
        if prof_cfg is None or not prof_cfg.active:
            clinic_cfg = self._clinic_day_config(clinic_id, dia_semana)

        config = resolve_working_hours(prof_cfg, clinic_cfg)
        if config is None:
            logger.info("agenda.sem_configuracao", professional_id=q.professional_id, date=iso_day)
            return AvailableSlotsDTO(professional_id=q.professional_id, date=iso_day)

        bookings = self.booking_repo.list_for_day(q.professional_id, day)
        slots = compute_available_slots(config, bookings, iso_day, self.clock())
        logger.debug(
            "agenda.slots_calculados",
            professional_id=q.professional_id,
            date=iso_day,
            bookings=len(bookings),
            slots=len(slots),
        )
        return AvailableSlotsDTO(professional_id=q.professional_id, date=iso_day, slots=slots)

    def _clinic_day_config(self, clinic_id: str, dia_semana: int) -> WorkingHoursEntity | None:
        raw = self.working_hours_repo.find_clinic_business_hours(clinic_id)
        if not raw:
            return None
        try:
            return BusinessHoursDTO.model_validate(raw).for_weekday(dia_semana)
        except ValidationError as exc:
            logger.warning(
                "agenda.horario_clinica_invalido",
                clinic_id=clinic_id,
                errors=exc.errors(include_url=False),
            )
            return None
