import structlog
from rest_framework.views import APIView

from plugins.django_interface.permissions import IsClinicMember


def clinic_scope(request) -> str | None:
    """
    Clínica à qual a requisição fica restrita.
    Admin → None (todas as clínicas); usuário 'clinic' → clinic_id do token.
    """
    if getattr(request.user, "role", None) == "admin":
        return None
    clinic_id = getattr(request.user, "clinic_id", None)
    return str(clinic_id) if clinic_id else None


class ClinicScopedAPIView(APIView):
    """APIView autenticada que adiciona user_id/clinic_id ao contexto de log."""
    permission_classes = [IsClinicMember]

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        structlog.contextvars.bind_contextvars(
            user_id=str(request.user.id),
            clinic_id=clinic_scope(request),
        )
