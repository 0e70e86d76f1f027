from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import date
from decimal import Decimal

import structlog
from django.db import transaction

from clinica_core.core.application.cqrs import CommandHandler
from clinica_core.core.domain.entities.audit_log_entity import AuditLogEntity
from clinica_core.core.domain.exceptions import NotFoundError
from clinica_core.core.domain.repositories.audit_log_repository import AuditLogRepository
from clinica_core.core.domain.services.event_dispatcher import EventDispatcher
from ortho_billing.core.application.commands.ortho_commands import AdjustPricesCommand
from ortho_billing.core.application.dtos.price_adjustment_dto import (
    PriceAdjustmentDTO,
    PriceAdjustmentResultDTO,
)
from ortho_billing.core.application.services.price_adjustment import compute_new_amount
from ortho_billing.core.domain.events.ortho_events import PricesAdjustedEvent
from ortho_billing.core.domain.repositories.ortho_case_repository import OrthoCaseRepository
from ortho_billing.core.domain.repositories.receivable_title_repository import (
    ReceivableTitleRepository,
)

logger = structlog.get_logger(__name__)

AUDIT_MODULE = "ortodontia"
ACTION_INDIVIDUAL = "ortho_reajuste_individual"
ACTION_BULK = "ortho_reajuste_massa"
NO_ACTIVE_CASES = "Nenhum caso ativo encontrado"


def _as_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


def _as_uuid(value: str | None) -> uuid.UUID | None:
    return uuid.UUID(str(value)) if value else None


class AdjustPricesHandler(CommandHandler[AdjustPricesCommand]):
    """
    Reajuste de mensalidade (individual ou em massa).

    Cada caso é lido, recalculado e gravado em uma transação própria com
    a linha do caso travada. No modo bulk os casos são confirmados um a
    um: uma falha no meio mantém os casos anteriores já reajustados.
    """

    def __init__(
        self,
        case_repo: OrthoCaseRepository,
        title_repo: ReceivableTitleRepository,
        audit_repo: AuditLogRepository,
        dispatcher: EventDispatcher,
        today: Callable[[], date],
    ):
        self.case_repo = case_repo
        self.title_repo = title_repo
        self.audit_repo = audit_repo
        self.dispatcher = dispatcher
        self.today = today

    def handle(self, cmd: AdjustPricesCommand) -> PriceAdjustmentResultDTO:
        data = cmd.payload
        if data.mode == "individual":
            result = self._adjust_individual(data, cmd.user_id, cmd.clinic_id)
        else:
            result = self._adjust_bulk(data, cmd.user_id, cmd.clinic_id)

        if result.cases_updated:
            self.dispatcher.dispatch(
                PricesAdjustedEvent(
                    mode=data.mode,
                    cases_updated=result.cases_updated,
                    titles_updated=result.titles_updated,
                    clinic_id=str(data.clinic_id) if data.clinic_id else None,
                    ortho_case_id=str(data.ortho_case_id) if data.ortho_case_id else None,
                )
            )
        return result

    # ─── individual ───────────────────────────────────────────────
    def _adjust_individual(
        self, data: PriceAdjustmentDTO, user_id: str | None, scope: str | None
    ) -> PriceAdjustmentResultDTO:
        case_id = str(data.ortho_case_id)
        today = self.today()

        with transaction.atomic():
            case = self.case_repo.lock_for_update(case_id, clinic_id=scope)
            if case is None:
                raise NotFoundError("Caso não encontrado")

            novo_valor = compute_new_amount(
                case.valor_mensalidade, data.percentual_reajuste, data.valor_fixo_novo
            )
            titles = self.title_repo.update_future_unpaid_amount(case_id, today, novo_valor)
            self.case_repo.update_monthly_amount(case_id, novo_valor)

            self.audit_repo.add(
                AuditLogEntity(
                    user_id=_as_uuid(user_id),
                    acao=ACTION_INDIVIDUAL,
                    modulo=AUDIT_MODULE,
                    detalhes={
                        "ortho_case_id": case_id,
                        "valor_anterior": _as_float(case.valor_mensalidade),
                        "valor_novo": float(novo_valor),
                        "percentual": _as_float(data.percentual_reajuste),
                        "valor_fixo": _as_float(data.valor_fixo_novo),
                        "titulos_atualizados": titles,
                    },
                )
            )

        logger.info(
            "ortho.price_adjusted",
            mode="individual",
            ortho_case_id=case_id,
            valor_anterior=str(case.valor_mensalidade),
            valor_novo=str(novo_valor),
            titles=titles,
            user_id=user_id,
        )
        return PriceAdjustmentResultDTO(
            cases_updated=1, titles_updated=titles, novo_valor=novo_valor
        )

    # ─── bulk ─────────────────────────────────────────────────────
    def _adjust_bulk(
        self, data: PriceAdjustmentDTO, user_id: str | None, scope: str | None
    ) -> PriceAdjustmentResultDTO:
        clinic_id = str(data.clinic_id)
        if scope and scope != clinic_id:
            raise NotFoundError("Clínica não encontrada")

        case_ids = self.case_repo.list_active_ids(clinic_id)
        if not case_ids:
            logger.info("ortho.price_adjusted.no_cases", clinic_id=clinic_id)
            return PriceAdjustmentResultDTO(message=NO_ACTIVE_CASES)

        today = self.today()
        cases_updated = 0
        titles_updated = 0
        for case_id in case_ids:
            with transaction.atomic():
                case = self.case_repo.lock_for_update(case_id, clinic_id=clinic_id)
                if case is None or not case.is_active:
                    continue
                if case.valor_mensalidade is None:
                    logger.warning("ortho.price_adjusted.sem_mensalidade", ortho_case_id=case_id)
                    continue
                novo_valor = compute_new_amount(case.valor_mensalidade, data.percentual_reajuste)
                titles_updated += self.title_repo.update_future_unpaid_amount(
                    case_id, today, novo_valor
                )
                self.case_repo.update_monthly_amount(case_id, novo_valor)
                cases_updated += 1

        self.audit_repo.add(
            AuditLogEntity(
                user_id=_as_uuid(user_id),
                acao=ACTION_BULK,
                modulo=AUDIT_MODULE,
                detalhes={
                    "clinic_id": clinic_id,
                    "percentual": _as_float(data.percentual_reajuste),
                    "casos_atualizados": cases_updated,
                    "titulos_atualizados": titles_updated,
                },
            )
        )
        logger.info(
            "ortho.price_adjusted",
            mode="bulk",
            clinic_id=clinic_id,
            cases=cases_updated,
            titles=titles_updated,
            user_id=user_id,
        )
        return PriceAdjustmentResultDTO(cases_updated=cases_updated, titles_updated=titles_updated)
