"""
Cálculo de horários livres de um profissional em um dia.

Funções puras: quem chama busca configuração e agendamentos no banco
(ver GetAvailableSlotsHandler) e informa o instante atual.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from agenda.core.domain.entities.booking_entity import BookingEntity
from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity


def resolve_working_hours(
    professional_config: WorkingHoursEntity | None,
    clinic_config: WorkingHoursEntity | None,
) -> WorkingHoursEntity | None:
    """Agenda do profissional tem prioridade; a da clínica é o fallback."""
    for cfg in (professional_config, clinic_config):
        if cfg is not None and cfg.active:
            return cfg
    return None


def format_minute(minute: int) -> str:
    return f"{minute // 60:02d}:{minute % 60:02d}"


def generate_candidate_slots(config: WorkingHoursEntity) -> list[int]:
    """Inícios de slot (em minutos do dia) no expediente, fora do almoço."""
    lunch = config.lunch_range
    slots: list[int] = []
    current = config.start_minute
    while current < config.end_minute:
        if lunch is None or current not in lunch:
            slots.append(current)
        current += config.slot_interval_minutes
    return slots


def occupied_minutes(config: WorkingHoursEntity, bookings: Iterable[BookingEntity]) -> set[int]:
    """
    Minutos de slot ocupados por agendamentos.

    Um agendamento sem duração (ou com duração zero) ocupa um slot. O início
    é alinhado para baixo na grade do expediente, então um agendamento que
    começa no meio de um slot bloqueia todos os slots que ele sobrepõe.
    """
    step = config.slot_interval_minutes
    origin = config.start_minute
    occupied: set[int] = set()
    for booking in bookings:
        duration = booking.duration_minutes if booking.duration_minutes and booking.duration_minutes > 0 else step
        begin = booking.start_minute
        aligned = origin + ((begin - origin) // step) * step
        occupied.update(range(aligned, begin + duration, step))
    return occupied


def compute_available_slots(
    config: WorkingHoursEntity | None,
    bookings: Iterable[BookingEntity],
    date_str: str,
    now: datetime,
) -> list[str]:
    """
    Retorna os horários livres ("HH:MM") em ordem cronológica.

    Para o dia corrente, descarta os horários até o minuto atual inclusive.
    """
    if config is None or not config.active:
        return []

    busy = occupied_minutes(config, bookings)
    is_today = date_str == now.date().isoformat()
    now_minute = now.hour * 60 + now.minute

    return [
        format_minute(minute)
        for minute in generate_candidate_slots(config)
        if minute not in busy and not (is_today and minute <= now_minute)
    ]
