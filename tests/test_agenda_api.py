"""GET /api/agenda/available-slots/ de ponta a ponta (ORM → handler → view)."""
from datetime import datetime, time

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from plugins.django_interface.models import Appointment, ClinicSettings
from tests.helpers.factories import (
    auth_client,
    make_clinic,
    make_patient,
    make_professional,
    make_schedule,
    make_user,
)

MONDAY = "2030-01-07"


class AvailableSlotsApiTests(TestCase):
    def setUp(self):
        self.clinic = make_clinic()
        self.user = make_user("clinic", self.clinic)
        self.client = auth_client(self.user, self.clinic)
        self.professional = make_professional(self.clinic)
        self.patient = make_patient(self.clinic)
        self.url = reverse("available-slots")

    def _get(self, **params):
        params.setdefault("professional_id", str(self.professional.id))
        params.setdefault("date", MONDAY)
        return self.client.get(self.url, params)

    def _book(self, hour, minute, duration, status=Appointment.Status.SCHEDULED):
        return Appointment.objects.create(
            clinic=self.clinic,
            patient=self.patient,
            dentist=self.professional,
            appointment_date=timezone.make_aware(datetime(2030, 1, 7, hour, minute)),
            duration_minutes=duration,
            status=status,
        )

    def test_professional_schedule_minus_bookings(self):
        make_schedule(self.professional, dia_semana=1, start=time(8, 0), end=time(11, 0))
        self._book(9, 0, 60)
        self._book(10, 0, 30, status=Appointment.Status.CANCELLED)

        resp = self._get()

        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertEqual(body["date"], MONDAY)
        self.assertEqual(body["professional_id"], str(self.professional.id))
        self.assertEqual(body["slots"], ["08:00", "08:30", "10:00", "10:30"])

    def test_falls_back_to_clinic_business_hours(self):
        ClinicSettings.objects.create(
            clinic=self.clinic,
            horario_funcionamento={
                "intervalo_padrao": 60,
                "dias": {"segunda": {"ativo": True, "inicio": "14:00", "fim": "17:00"}},
            },
        )
        make_schedule(self.professional, dia_semana=1, ativo=False)

        resp = self._get()

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["slots"], ["14:00", "15:00", "16:00"])

    def test_no_configuration_returns_empty_list(self):
        resp = self._get()
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["slots"], [])

    def test_malformed_clinic_hours_are_ignored(self):
        ClinicSettings.objects.create(
            clinic=self.clinic,
            horario_funcionamento={"intervalo_padrao": 0, "dias": {}},
        )
        resp = self._get()
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["slots"], [])

    def test_invalid_date_is_rejected(self):
        resp = self._get(date="07/01/2030")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("error", resp.json())

    def test_compact_date_is_rejected(self):
        resp = self._get(date="20300107")
        self.assertEqual(resp.status_code, 400)

    def test_missing_parameters_are_rejected(self):
        resp = self.client.get(self.url, {"date": MONDAY})
        self.assertEqual(resp.status_code, 400)

    def test_professional_from_other_clinic_is_not_found(self):
        other = make_professional(make_clinic("Outra Clínica"))
        resp = self._get(professional_id=str(other.id))
        self.assertEqual(resp.status_code, 404)

    def test_admin_sees_any_clinic(self):
        make_schedule(self.professional, dia_semana=1, start=time(8, 0), end=time(9, 0))
        admin = make_user("admin")
        resp = auth_client(admin).get(
            self.url, {"professional_id": str(self.professional.id), "date": MONDAY}
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["slots"], ["08:00", "08:30"])

    def test_requires_authentication(self):
        resp = APIClient().get(self.url, {"professional_id": str(self.professional.id), "date": MONDAY})
        self.assertEqual(resp.status_code, 401)
