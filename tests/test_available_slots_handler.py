"""Handler de horários livres com repositórios em memória e relógio fixo."""
from datetime import datetime, time

from django.test import SimpleTestCase

from agenda.core.application.handlers.available_slots_handler import GetAvailableSlotsHandler
from agenda.core.application.queries.available_slots_queries import GetAvailableSlotsQuery
from agenda.core.domain.entities.working_hours_entity import WorkingHoursEntity
from agenda.core.domain.repositories.booking_repository import BookingRepository
from agenda.core.domain.repositories.working_hours_repository import WorkingHoursRepository
from clinica_core.core.domain.exceptions import InvalidInputError

PROF_ID = "prof-1"
CLINIC_ID = "clinic-1"
MONDAY_AFTERNOON = datetime(2030, 1, 7, 14, 5)


class InMemoryWorkingHours(WorkingHoursRepository):
    def professional_clinic_id(self, professional_id):
        return CLINIC_ID if professional_id == PROF_ID else None

    def find_professional_day(self, professional_id, dia_semana):
        return WorkingHoursEntity(start=time(8, 0), end=time(18, 0), slot_interval_minutes=30)

    def find_clinic_business_hours(self, clinic_id):
        return None


class NoBookings(BookingRepository):
    def list_for_day(self, professional_id, day):
        return []


def _handler() -> GetAvailableSlotsHandler:
    return GetAvailableSlotsHandler(
        working_hours_repo=InMemoryWorkingHours(),
        booking_repo=NoBookings(),
        clock=lambda: MONDAY_AFTERNOON,
    )


def _query(day: str) -> GetAvailableSlotsQuery:
    return GetAvailableSlotsQuery(filtros={}, professional_id=PROF_ID, date=day)


class DateFormatTests(SimpleTestCase):
    def test_today_hides_slots_already_past(self):
        dto = _handler().handle(_query("2030-01-07"))
        self.assertEqual(dto.slots[0], "14:30")
        self.assertNotIn("14:00", dto.slots)

    def test_compact_date_is_rejected(self):
        with self.assertRaises(InvalidInputError):
            _handler().handle(_query("20300107"))

    def test_unpadded_date_is_normalised_before_today_filter(self):
        dto = _handler().handle(_query("2030-1-7"))
        self.assertEqual(dto.date, "2030-01-07")
        self.assertEqual(dto.slots[0], "14:30")

    def test_other_day_keeps_full_schedule(self):
        dto = _handler().handle(_query("2030-01-08"))
        self.assertEqual(dto.slots[0], "08:00")
