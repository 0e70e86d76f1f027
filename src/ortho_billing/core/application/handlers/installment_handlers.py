from __future__ import annotations

from collections.abc import Callable
from datetime import date

import structlog
from django.db import IntegrityError, transaction

from clinica_core.core.application.cqrs import CommandHandler
from clinica_core.core.domain.exceptions import ConflictError, NotFoundError
from clinica_core.core.domain.services.event_dispatcher import EventDispatcher
from ortho_billing.core.application.commands.ortho_commands import GenerateInstallmentsCommand
from ortho_billing.core.application.dtos.ortho_case_dto import GeneratedInstallmentsDTO
from ortho_billing.core.application.services.installment_schedule import (
    build_installment_schedule,
)
from ortho_billing.core.domain.events.ortho_events import InstallmentsGeneratedEvent
from ortho_billing.core.domain.repositories.ortho_case_repository import OrthoCaseRepository
from ortho_billing.core.domain.repositories.receivable_title_repository import (
    ReceivableTitleRepository,
)

logger = structlog.get_logger(__name__)

ALREADY_GENERATED = "Parcelas já foram geradas para este caso"


class GenerateInstallmentsHandler(CommandHandler[GenerateInstallmentsCommand]):
    """
    Gera entrada + mensalidades de um caso ortodôntico, uma única vez.

    A linha do caso fica travada durante checagem e inserção; a UK
    (ortho_case, installment_number) cobre uma corrida que escape do lock.
    """

    def __init__(
        self,
        case_repo: OrthoCaseRepository,
        title_repo: ReceivableTitleRepository,
        dispatcher: EventDispatcher,
        today: Callable[[], date],
        default_due_day: int,
    ):
        self.case_repo = case_repo
        self.title_repo = title_repo
        self.dispatcher = dispatcher
        self.today = today
        self.default_due_day = default_due_day

    def handle(self, cmd: GenerateInstallmentsCommand) -> GeneratedInstallmentsDTO:
        with transaction.atomic():
            case = self.case_repo.lock_for_update(cmd.ortho_case_id, clinic_id=cmd.clinic_id)
            if case is None:
                raise NotFoundError("Caso não encontrado")
            if self.title_repo.exists_for_case(str(case.id)):
                raise ConflictError(ALREADY_GENERATED)

            titles = build_installment_schedule(
                case, today=self.today(), default_due_day=self.default_due_day
            )
            try:
                count = self.title_repo.add_many(titles)
            except IntegrityError as exc:
                logger.warning(
                    "ortho.installments.duplicate",
                    ortho_case_id=str(case.id),
                    error=str(exc),
                )
                raise ConflictError(ALREADY_GENERATED) from exc

        logger.info(
            "ortho.installments.generated",
            ortho_case_id=str(case.id),
            count=count,
            user_id=cmd.user_id,
        )
        self.dispatcher.dispatch(
            InstallmentsGeneratedEvent(ortho_case_id=str(case.id), count=count)
        )
        return GeneratedInstallmentsDTO(ortho_case_id=str(case.id), count=count)
