"""POST /api/ortho/generate-installments/"""
import uuid
from datetime import date

from django.test import TestCase
from django.urls import reverse
from prometheus_client import REGISTRY

from plugins.django_interface.models import ReceivableTitle
from tests.helpers.factories import auth_client, make_case, make_clinic, make_user


def _generated_total() -> float:
    return REGISTRY.get_sample_value("ortho_installments_generated_total") or 0.0


def _view_calls(status: str) -> float:
    return REGISTRY.get_sample_value(
        "clinica_view_duration_seconds_count",
        {"view": "GenerateInstallmentsView_post", "status": status},
    ) or 0.0


class GenerateInstallmentsApiTests(TestCase):
    def setUp(self):
        self.clinic = make_clinic()
        self.client = auth_client(make_user("clinic", self.clinic), self.clinic)
        self.url = reverse("generate-installments")

    def _post(self, case_id):
        return self.client.post(self.url, {"ortho_case_id": str(case_id)}, format="json")

    def test_generates_monthly_titles_once(self):
        case = make_case(self.clinic, valor_entrada="1000.00", dia_vencimento=31)
        before = _generated_total()

        resp = self._post(case.id)

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True, "count": 13})
        titles = ReceivableTitle.objects.filter(ortho_case=case).order_by("installment_number")
        self.assertEqual(titles.count(), 13)
        self.assertEqual(titles[0].installment_number, 0)
        self.assertEqual(titles[2].due_date, date(2024, 2, 29))
        self.assertEqual(titles[12].notes, "Mensalidade Ortodontia 12/12")
        self.assertEqual(_generated_total() - before, 13)

        again = self._post(case.id)
        self.assertEqual(again.status_code, 409)
        self.assertIn("error", again.json())
        self.assertEqual(ReceivableTitle.objects.filter(ortho_case=case).count(), 13)

    def test_missing_case_id(self):
        resp = self.client.post(self.url, {}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_unknown_case(self):
        resp = self._post(uuid.uuid4())
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Caso não encontrado"})

    def test_domain_errors_are_timed_with_their_status(self):
        before = _view_calls("404")
        self._post(uuid.uuid4())
        self.assertEqual(_view_calls("404") - before, 1)

        before = _view_calls("400")
        self.client.post(self.url, {}, format="json")
        self.assertEqual(_view_calls("400") - before, 1)

    def test_malformed_case_id_is_not_found(self):
        resp = self._post("nao-e-uuid")
        self.assertEqual(resp.status_code, 404)

    def test_case_from_other_clinic_is_not_found(self):
        other = make_case(make_clinic("Outra Clínica"))
        resp = self._post(other.id)
        self.assertEqual(resp.status_code, 404)
        self.assertFalse(ReceivableTitle.objects.filter(ortho_case=other).exists())

    def test_incomplete_financial_data(self):
        case = make_case(self.clinic, valor_mensalidade=None)
        resp = self._post(case.id)
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(ReceivableTitle.objects.filter(ortho_case=case).exists())

    def test_admin_can_generate_for_any_clinic(self):
        case = make_case(self.clinic, total_meses=3)
        resp = auth_client(make_user("admin")).post(
            self.url, {"ortho_case_id": str(case.id)}, format="json"
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["count"], 3)
