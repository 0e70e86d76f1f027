"""
Cronograma de parcelas de um caso ortodôntico.

Funções puras: recebem a entidade do caso e a data de "hoje" e devolvem
os títulos a inserir, sem acesso a banco.
"""
from __future__ import annotations

import calendar
from datetime import date

from clinica_core.core.domain.exceptions import InvalidInputError
from ortho_billing.core.domain.entities.ortho_case_entity import OrthoCaseEntity
from ortho_billing.core.domain.entities.receivable_title_entity import (
    STATUS_OPEN,
    ReceivableTitleEntity,
)

DEFAULT_DUE_DAY = 10
TITLE_ORIGIN = "ortodontia"
DOWN_PAYMENT_NOTE = "Entrada - Tratamento Ortodôntico"


def due_date_for(start: date, offset: int, due_day: int) -> date:
    """
    Vencimento da parcela `offset` (0-based) contado a partir do mês de `start`.

    O mês é indexado a partir de zero para que dezembro + 1 caia em
    janeiro do ano seguinte; o dia é limitado ao último dia do mês alvo
    (31 → 28/29 em fevereiro, 30 em abril).
    """
    month_index = start.month - 1 + offset
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(due_day, last_day))


def build_installment_schedule(
    case: OrthoCaseEntity,
    today: date,
    default_due_day: int = DEFAULT_DUE_DAY,
) -> list[ReceivableTitleEntity]:
    if not case.valor_mensalidade or not case.total_meses:
        raise InvalidInputError(
            "Dados financeiros incompletos no caso (mensalidade e meses são obrigatórios)"
        )

    due_day = case.dia_vencimento or default_due_day
    total = case.total_meses
    titles: list[ReceivableTitleEntity] = []

    if case.has_down_payment:
        titles.append(
            ReceivableTitleEntity(
                clinic_id=case.clinic_id,
                patient_id=case.patient_id,
                ortho_case_id=case.id,
                amount=case.valor_entrada,
                balance=case.valor_entrada,
                due_date=today,
                status=STATUS_OPEN,
                origin=TITLE_ORIGIN,
                notes=DOWN_PAYMENT_NOTE,
                installment_number=0,
                total_installments=total,
            )
        )

    for i in range(total):
        titles.append(
            ReceivableTitleEntity(
                clinic_id=case.clinic_id,
                patient_id=case.patient_id,
                ortho_case_id=case.id,
                amount=case.valor_mensalidade,
                balance=case.valor_mensalidade,
                due_date=due_date_for(case.data_inicio, i, due_day),
                status=STATUS_OPEN,
                origin=TITLE_ORIGIN,
                notes=f"Mensalidade Ortodontia {i + 1}/{total}",
                installment_number=i + 1,
                total_installments=total,
            )
        )
    return titles
