# ╭────────────────────────────────────────────────────────────────────────╮
# │  Ortodontia: casos, geração de parcelas e reajuste de mensalidade     │
# ╰────────────────────────────────────────────────────────────────────────╯
from __future__ import annotations

import uuid

from rest_framework import status
from rest_framework.response import Response

from clinica_core.adapters.observability.decorators import track_http
from clinica_core.core.domain.exceptions import InvalidInputError
from ortho_billing.adapters.config.composition_root import container as ortho_container
from ortho_billing.core.application.commands.ortho_commands import (
    AdjustPricesCommand,
    CreateOrthoCaseCommand,
    GenerateInstallmentsCommand,
)
from ortho_billing.core.application.dtos.ortho_case_dto import CreateOrthoCaseDTO
from ortho_billing.core.application.dtos.price_adjustment_dto import PriceAdjustmentDTO
from ortho_billing.core.application.queries.ortho_queries import (
    GetOrthoCaseQuery,
    ListCaseTitlesQuery,
    ListOrthoCasesQuery,
)
from plugins.django_interface.serializers.core_serializers import (
    OrthoCaseSerializer,
    ReceivableTitleSerializer,
)
from plugins.django_interface.views.base import ClinicScopedAPIView, clinic_scope

# ───────────────────────────────  CQRS Buses  ────────────────────────────────
ortho_command_bus = ortho_container.command_bus()
ortho_query_bus = ortho_container.query_bus()


class OrthoCaseListCreateView(ClinicScopedAPIView):
    """
    GET  /api/ortho/cases/   → casos da clínica (admin: ?clinic_id= opcional)
    POST /api/ortho/cases/   → cria caso; com plano completo gera as parcelas
    """

    @track_http("OrthoCaseListCreateView_get")
    def get(self, request):
        scope = clinic_scope(request) or request.query_params.get("clinic_id")
        if scope:
            try:
                scope = str(uuid.UUID(scope))
            except ValueError:
                raise InvalidInputError("clinic_id inválido")  # noqa: B904
        cases = ortho_query_bus.dispatch(
            ListOrthoCasesQuery(
                filtros={},
                clinic_id=scope or None,
                status=request.query_params.get("status") or None,
            )
        )
        return Response(OrthoCaseSerializer(cases, many=True).data)

    @track_http("OrthoCaseListCreateView_post")
    def post(self, request):
        dto = CreateOrthoCaseDTO.model_validate(request.data)
        clinic_id = clinic_scope(request) or (str(dto.clinic_id) if dto.clinic_id else None)
        if not clinic_id:
            raise InvalidInputError("clinic_id é obrigatório")

        result = ortho_command_bus.dispatch(
            CreateOrthoCaseCommand(
                payload=dto,
                clinic_id=clinic_id,
                user_id=str(request.user.id),
            )
        )
        body = {
            "case": OrthoCaseSerializer(result.case).data,
            "installments": {
                "generated": result.installments_error is None and result.installments_count > 0,
                "count": result.installments_count,
                "error": result.installments_error,
            },
        }
        return Response(body, status=status.HTTP_201_CREATED)


class OrthoCaseDetailView(ClinicScopedAPIView):
    @track_http("OrthoCaseDetailView_get")
    def get(self, request, case_id):
        case = ortho_query_bus.dispatch(
            GetOrthoCaseQuery(filtros={}, ortho_case_id=str(case_id), clinic_id=clinic_scope(request))
        )
        return Response(OrthoCaseSerializer(case).data)


class OrthoCaseTitlesView(ClinicScopedAPIView):
    @track_http("OrthoCaseTitlesView_get")
    def get(self, request, case_id):
        titles = ortho_query_bus.dispatch(
            ListCaseTitlesQuery(filtros={}, ortho_case_id=str(case_id), clinic_id=clinic_scope(request))
        )
        return Response(ReceivableTitleSerializer(titles, many=True).data)


class GenerateInstallmentsView(ClinicScopedAPIView):
    """POST /api/ortho/generate-installments/  {"ortho_case_id": "<uuid>"}"""

    @track_http("GenerateInstallmentsView_post")
    def post(self, request):
        ortho_case_id = request.data.get("ortho_case_id")
        if not ortho_case_id:
            raise InvalidInputError("ortho_case_id é obrigatório")

        res = ortho_command_bus.dispatch(
            GenerateInstallmentsCommand(
                ortho_case_id=str(ortho_case_id),
                user_id=str(request.user.id),
                clinic_id=clinic_scope(request),
            )
        )
        return Response({"success": True, "count": res.count}, status=status.HTTP_200_OK)


class PriceAdjustmentView(ClinicScopedAPIView):
    """
    POST /api/ortho/price-adjustment/

    Payload validado antes de qualquer leitura/escrita no banco.
    """

    @track_http("PriceAdjustmentView_post")
    def post(self, request):
        dto = PriceAdjustmentDTO.model_validate(request.data)
        res = ortho_command_bus.dispatch(
            AdjustPricesCommand(
                payload=dto,
                user_id=str(request.user.id),
                clinic_id=clinic_scope(request),
            )
        )
        body = {
            "success": True,
            "casesUpdated": res.cases_updated,
            "titulosUpdated": res.titles_updated,
        }
        if res.novo_valor is not None:
            body["novoValor"] = float(res.novo_valor)
        if res.message:
            body["message"] = res.message
        return Response(body, status=status.HTTP_200_OK)
