"""Cronograma de parcelas: datas de vencimento e títulos gerados (sem banco)."""
import uuid
from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from clinica_core.core.domain.exceptions import InvalidInputError
from ortho_billing.core.application.services.installment_schedule import (
    DOWN_PAYMENT_NOTE,
    build_installment_schedule,
    due_date_for,
)
from ortho_billing.core.domain.entities.ortho_case_entity import OrthoCaseEntity

TODAY = date(2024, 1, 15)


def _case(**overrides) -> OrthoCaseEntity:
    data = {
        "id": uuid.uuid4(),
        "clinic_id": uuid.uuid4(),
        "patient_id": uuid.uuid4(),
        "data_inicio": date(2024, 1, 31),
        "valor_mensalidade": Decimal("500.00"),
        "total_meses": 12,
        "dia_vencimento": 31,
    }
    data.update(overrides)
    return OrthoCaseEntity(**data)


class DueDateTests(SimpleTestCase):
    def test_day_is_clamped_to_end_of_month(self):
        start = date(2024, 1, 31)
        self.assertEqual(due_date_for(start, 0, 31), date(2024, 1, 31))
        self.assertEqual(due_date_for(start, 1, 31), date(2024, 2, 29))
        self.assertEqual(due_date_for(start, 2, 31), date(2024, 3, 31))
        self.assertEqual(due_date_for(start, 3, 31), date(2024, 4, 30))

    def test_non_leap_february(self):
        self.assertEqual(due_date_for(date(2023, 1, 5), 1, 30), date(2023, 2, 28))

    def test_december_rolls_into_next_year(self):
        start = date(2024, 11, 20)
        self.assertEqual(due_date_for(start, 1, 10), date(2024, 12, 10))
        self.assertEqual(due_date_for(start, 2, 10), date(2025, 1, 10))
        self.assertEqual(due_date_for(start, 14, 10), date(2026, 1, 10))


class BuildScheduleTests(SimpleTestCase):
    def test_monthly_titles(self):
        case = _case()
        titles = build_installment_schedule(case, TODAY)

        self.assertEqual(len(titles), 12)
        self.assertEqual([t.installment_number for t in titles], list(range(1, 13)))
        self.assertEqual(titles[1].due_date, date(2024, 2, 29))
        self.assertEqual(titles[-1].due_date, date(2024, 12, 31))
        first = titles[0]
        self.assertEqual(first.notes, "Mensalidade Ortodontia 1/12")
        self.assertEqual(first.amount, Decimal("500.00"))
        self.assertEqual(first.balance, Decimal("500.00"))
        self.assertEqual(first.status, "open")
        self.assertEqual(first.origin, "ortodontia")
        self.assertEqual(first.total_installments, 12)
        self.assertEqual(first.ortho_case_id, case.id)
        self.assertEqual(first.clinic_id, case.clinic_id)

    def test_down_payment_comes_first_due_today(self):
        titles = build_installment_schedule(_case(valor_entrada=Decimal("1000.00")), TODAY)

        self.assertEqual(len(titles), 13)
        entrada = titles[0]
        self.assertEqual(entrada.installment_number, 0)
        self.assertEqual(entrada.due_date, TODAY)
        self.assertEqual(entrada.amount, Decimal("1000.00"))
        self.assertEqual(entrada.notes, DOWN_PAYMENT_NOTE)

    def test_zero_down_payment_is_skipped(self):
        titles = build_installment_schedule(_case(valor_entrada=Decimal("0")), TODAY)
        self.assertEqual(len(titles), 12)

    def test_default_due_day(self):
        titles = build_installment_schedule(_case(dia_vencimento=None), TODAY)
        self.assertTrue(all(t.due_date.day == 10 for t in titles))

        titles = build_installment_schedule(_case(dia_vencimento=None), TODAY, default_due_day=5)
        self.assertTrue(all(t.due_date.day == 5 for t in titles))

    def test_incomplete_financial_data(self):
        with self.assertRaises(InvalidInputError):
            build_installment_schedule(_case(valor_mensalidade=None), TODAY)
        with self.assertRaises(InvalidInputError):
            build_installment_schedule(_case(total_meses=0), TODAY)
