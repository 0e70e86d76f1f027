"""POST /api/receivables/<title_id>/payments/"""
import uuid
from datetime import date
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from plugins.django_interface.models import AuditLog, Payment, ReceivableTitle
from tests.helpers.factories import auth_client, make_case, make_clinic, make_title, make_user


class RecordPaymentTests(TestCase):
    def setUp(self):
        self.clinic = make_clinic()
        self.user = make_user("clinic", self.clinic)
        self.client = auth_client(self.user, self.clinic)
        self.case = make_case(self.clinic)
        self.title = make_title(self.case, date(2030, 5, 10), installment_number=1)

    def _pay(self, title=None, **payload):
        payload.setdefault("method", "pix")
        url = reverse("record-payment", args=[(title or self.title).id])
        return self.client.post(url, payload, format="json")

    def test_partial_payment(self):
        resp = self._pay(amount="200.00")

        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["title_status"], "partial")
        self.assertEqual(body["title_balance"], 300.0)

        self.title.refresh_from_db()
        self.assertEqual(self.title.balance, Decimal("300.00"))
        self.assertEqual(self.title.amount, Decimal("500.00"))
        self.assertEqual(self.title.payment_method, "pix")

        payment = Payment.objects.get(id=body["payment_id"])
        self.assertEqual(payment.value, Decimal("200.00"))
        self.assertEqual(payment.created_by, self.user.id)
        self.assertEqual(payment.patient_id, self.case.patient_id)

    def test_full_payment_closes_title(self):
        self._pay(amount="200.00")
        resp = self._pay(amount="300.00", method="cartao")

        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()["title_status"], "paid")
        self.assertEqual(resp.json()["title_balance"], 0.0)
        self.assertEqual(Payment.objects.filter(title=self.title).count(), 2)

    def test_amount_above_balance(self):
        resp = self._pay(amount="500.01")

        self.assertEqual(resp.status_code, 400)
        self.assertIn("excede o saldo", resp.json()["error"])
        self.assertFalse(Payment.objects.exists())

    def test_paid_title_is_rejected(self):
        paid = make_title(
            self.case, date(2030, 6, 10), balance="0.00",
            status=ReceivableTitle.Status.PAID, installment_number=2,
        )
        resp = self._pay(paid, amount="10.00")
        self.assertEqual(resp.status_code, 400)

    def test_cancelled_title_is_rejected(self):
        cancelled = make_title(
            self.case, date(2030, 6, 10),
            status=ReceivableTitle.Status.CANCELLED, installment_number=2,
        )
        resp = self._pay(cancelled, amount="10.00")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "Título já está cancelled"})

    def test_non_positive_amount(self):
        for amount in ("0", "-5"):
            resp = self._pay(amount=amount)
            self.assertEqual(resp.status_code, 400)
        self.assertFalse(Payment.objects.exists())

    def test_method_is_required(self):
        url = reverse("record-payment", args=[self.title.id])
        resp = self.client.post(url, {"amount": "10.00"}, format="json")
        self.assertEqual(resp.status_code, 400)

    def test_title_from_other_clinic(self):
        foreign = make_title(make_case(make_clinic("Outra Clínica")), date(2030, 5, 10))
        resp = self._pay(foreign, amount="10.00")
        self.assertEqual(resp.status_code, 404)

    def test_unknown_title(self):
        url = reverse("record-payment", args=[uuid.uuid4()])
        resp = self.client.post(url, {"amount": "10.00", "method": "pix"}, format="json")
        self.assertEqual(resp.status_code, 404)

    def test_writes_audit(self):
        resp = self._pay(amount="125.50", notes="Pago na recepção")

        log = AuditLog.objects.get(acao="record_payment")
        self.assertEqual(log.modulo, "financeiro")
        self.assertEqual(log.user_id, self.user.id)
        self.assertEqual(log.detalhes["payment_id"], resp.json()["payment_id"])
        self.assertEqual(log.detalhes["amount"], 125.5)
        self.assertEqual(log.detalhes["new_status"], "partial")
