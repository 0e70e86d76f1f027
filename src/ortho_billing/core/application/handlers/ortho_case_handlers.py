from __future__ import annotations

import uuid
from dataclasses import dataclass

import structlog
from django.db import DatabaseError

from clinica_core.core.application.cqrs import CommandHandler, QueryHandler
from clinica_core.core.domain.exceptions import DomainError, NotFoundError
from ortho_billing.core.application.commands.ortho_commands import (
    CreateOrthoCaseCommand,
    GenerateInstallmentsCommand,
)
from ortho_billing.core.application.handlers.installment_handlers import (
    GenerateInstallmentsHandler,
)
from ortho_billing.core.application.queries.ortho_queries import (
    GetOrthoCaseQuery,
    ListCaseTitlesQuery,
    ListOrthoCasesQuery,
)
from ortho_billing.core.domain.entities.ortho_case_entity import OrthoCaseEntity
from ortho_billing.core.domain.entities.receivable_title_entity import ReceivableTitleEntity
from ortho_billing.core.domain.repositories.ortho_case_repository import OrthoCaseRepository
from ortho_billing.core.domain.repositories.receivable_title_repository import (
    ReceivableTitleRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(slots=True)
class CreatedOrthoCase:
    case: OrthoCaseEntity
    installments_count: int = 0
    installments_error: str | None = None


class CreateOrthoCaseHandler(CommandHandler[CreateOrthoCaseCommand]):
    """
    Cria o caso e, havendo plano completo (mensalidade, meses e dia de
    vencimento), gera as parcelas em seguida. Falha na geração não
    desfaz o caso: o erro volta no resultado.
    """

    def __init__(
        self,
        case_repo: OrthoCaseRepository,
        installments_handler: GenerateInstallmentsHandler,
    ):
        self.case_repo = case_repo
        self.installments_handler = installments_handler

    def handle(self, cmd: CreateOrthoCaseCommand) -> CreatedOrthoCase:
        data = cmd.payload
        if not self.case_repo.patient_in_clinic(str(data.patient_id), cmd.clinic_id):
            raise NotFoundError("Paciente não encontrado")
        if data.professional_id and not self.case_repo.professional_in_clinic(
            str(data.professional_id), cmd.clinic_id
        ):
            raise NotFoundError("Profissional não encontrado")

        case = self.case_repo.add(
            OrthoCaseEntity(
                id=uuid.uuid4(),
                clinic_id=uuid.UUID(str(cmd.clinic_id)),
                **data.model_dump(exclude={"clinic_id"}),
            )
        )
        logger.info("ortho.case.created", ortho_case_id=str(case.id), clinic_id=cmd.clinic_id)

        result = CreatedOrthoCase(case=case)
        if not case.has_billing_plan:
            return result

        try:
            generated = self.installments_handler.handle(
                GenerateInstallmentsCommand(
                    ortho_case_id=str(case.id),
                    user_id=cmd.user_id,
                    clinic_id=cmd.clinic_id,
                )
            )
            result.installments_count = generated.count
        except (DomainError, DatabaseError) as exc:
            logger.error(
                "ortho.case.installments_failed",
                ortho_case_id=str(case.id),
                error=str(exc),
                exc_info=True,
            )
            result.installments_error = getattr(exc, "message", str(exc))
        return result


class GetOrthoCaseHandler(QueryHandler[GetOrthoCaseQuery, OrthoCaseEntity]):
    def __init__(self, case_repo: OrthoCaseRepository):
        self.case_repo = case_repo

    def handle(self, q: GetOrthoCaseQuery) -> OrthoCaseEntity:
        case = self.case_repo.find_by_id(q.ortho_case_id, clinic_id=q.clinic_id)
        if case is None:
            raise NotFoundError("Caso não encontrado")
        return case


class ListCaseTitlesHandler(QueryHandler[ListCaseTitlesQuery, list[ReceivableTitleEntity]]):
    def __init__(self, case_repo: OrthoCaseRepository, title_repo: ReceivableTitleRepository):
        self.case_repo = case_repo
        self.title_repo = title_repo

    def handle(self, q: ListCaseTitlesQuery) -> list[ReceivableTitleEntity]:
        if self.case_repo.find_by_id(q.ortho_case_id, clinic_id=q.clinic_id) is None:
            raise NotFoundError("Caso não encontrado")
        return self.title_repo.list_by_case(q.ortho_case_id)


class ListOrthoCasesHandler(QueryHandler[ListOrthoCasesQuery, list[OrthoCaseEntity]]):
    def __init__(self, case_repo: OrthoCaseRepository):
        self.case_repo = case_repo

    def handle(self, q: ListOrthoCasesQuery) -> list[OrthoCaseEntity]:
        return self.case_repo.list_cases(clinic_id=q.clinic_id, status=q.status)
