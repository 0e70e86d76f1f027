from rest_framework import status
from rest_framework.response import Response

from clinica_core.adapters.observability.decorators import track_http
from ortho_billing.adapters.config.composition_root import container as ortho_container
from ortho_billing.core.application.commands.ortho_commands import RecordPaymentCommand
from ortho_billing.core.application.dtos.payment_dto import RecordPaymentDTO
from plugins.django_interface.views.base import ClinicScopedAPIView, clinic_scope

ortho_command_bus = ortho_container.command_bus()


class RecordPaymentView(ClinicScopedAPIView):
    """POST /api/receivables/<title_id>/payments/  {"amount", "method", "paid_at"?, "notes"?}"""

    @track_http("RecordPaymentView_post")
    def post(self, request, title_id):
        dto = RecordPaymentDTO.model_validate(request.data)
        res = ortho_command_bus.dispatch(
            RecordPaymentCommand(
                title_id=str(title_id),
                payload=dto,
                user_id=str(request.user.id),
                clinic_id=clinic_scope(request),
            )
        )
        return Response(
            {
                "success": True,
                "payment_id": res.payment_id,
                "title_status": res.title_status,
                "title_balance": float(res.title_balance),
            },
            status=status.HTTP_201_CREATED,
        )
