from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime

import structlog
from django.db import transaction

from clinica_core.core.application.cqrs import CommandHandler
from clinica_core.core.domain.entities.audit_log_entity import AuditLogEntity
from clinica_core.core.domain.exceptions import InvalidInputError, NotFoundError
from clinica_core.core.domain.repositories.audit_log_repository import AuditLogRepository
from clinica_core.core.domain.services.event_dispatcher import EventDispatcher
from ortho_billing.core.application.commands.ortho_commands import RecordPaymentCommand
from ortho_billing.core.application.dtos.payment_dto import RecordedPaymentDTO
from ortho_billing.core.application.services.price_adjustment import round_money
from ortho_billing.core.domain.entities.payment_entity import PaymentEntity
from ortho_billing.core.domain.entities.receivable_title_entity import (
    STATUS_PAID,
    STATUS_PARTIAL,
)
from ortho_billing.core.domain.events.ortho_events import PaymentRecordedEvent
from ortho_billing.core.domain.repositories.payment_repository import PaymentRepository
from ortho_billing.core.domain.repositories.receivable_title_repository import (
    ReceivableTitleRepository,
)

logger = structlog.get_logger(__name__)


class RecordPaymentHandler(CommandHandler[RecordPaymentCommand]):
    """Baixa (total ou parcial) de um título a receber."""

    def __init__(
        self,
        title_repo: ReceivableTitleRepository,
        payment_repo: PaymentRepository,
        audit_repo: AuditLogRepository,
        dispatcher: EventDispatcher,
        now: Callable[[], datetime],
    ):
        self.title_repo = title_repo
        self.payment_repo = payment_repo
        self.audit_repo = audit_repo
        self.dispatcher = dispatcher
        self.now = now

    def handle(self, cmd: RecordPaymentCommand) -> RecordedPaymentDTO:
        data = cmd.payload
        amount = round_money(data.amount)

        with transaction.atomic():
            title = self.title_repo.lock_for_update(cmd.title_id, clinic_id=cmd.clinic_id)
            if title is None:
                raise NotFoundError("Título não encontrado")
            if amount > title.balance:
                raise InvalidInputError(
                    f"Valor do pagamento ({amount}) excede o saldo ({title.balance})"
                )
            if title.is_closed:
                raise InvalidInputError(f"Título já está {title.status}")

            payment = self.payment_repo.add(
                PaymentEntity(
                    title_id=title.id,
                    patient_id=title.patient_id,
                    payment_date=data.paid_at or self.now(),
                    payment_method=data.method,
                    value=amount,
                    notes=data.notes,
                    created_by=uuid.UUID(cmd.user_id) if cmd.user_id else None,
                )
            )
            new_balance = title.balance - amount
            new_status = STATUS_PAID if new_balance <= 0 else STATUS_PARTIAL
            self.title_repo.apply_payment(str(title.id), new_balance, new_status, data.method)

            self.audit_repo.add(
                AuditLogEntity(
                    user_id=uuid.UUID(cmd.user_id) if cmd.user_id else None,
                    acao="record_payment",
                    modulo="financeiro",
                    detalhes={
                        "title_id": str(title.id),
                        "payment_id": str(payment.id),
                        "amount": float(amount),
                        "method": data.method,
                        "new_balance": float(new_balance),
                        "new_status": new_status,
                    },
                )
            )

        logger.info(
            "receivable.payment_recorded",
            title_id=str(title.id),
            payment_id=str(payment.id),
            amount=str(amount),
            status=new_status,
        )
        self.dispatcher.dispatch(
            PaymentRecordedEvent(
                title_id=str(title.id),
                payment_id=str(payment.id),
                amount=amount,
                method=data.method,
                title_status=new_status,
            )
        )
        return RecordedPaymentDTO(
            payment_id=str(payment.id),
            title_id=str(title.id),
            title_status=new_status,
            title_balance=new_balance,
        )
