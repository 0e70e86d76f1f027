from rest_framework import status
from rest_framework.response import Response

from agenda.adapters.config.composition_root import container as agenda_container
from agenda.core.application.queries.available_slots_queries import GetAvailableSlotsQuery
from clinica_core.adapters.observability.decorators import track_http
from clinica_core.core.domain.exceptions import InvalidInputError
from plugins.django_interface.serializers.core_serializers import AvailableSlotsSerializer
from plugins.django_interface.views.base import ClinicScopedAPIView, clinic_scope

agenda_query_bus = agenda_container.query_bus()


class AvailableSlotsView(ClinicScopedAPIView):
    """
    GET /api/agenda/available-slots/?professional_id=<uuid>&date=YYYY-MM-DD

    Horários livres ("HH:MM") do profissional na data.
    """

    @track_http("AvailableSlotsView_get")
    def get(self, request):
        professional_id = request.query_params.get("professional_id")
        day = request.query_params.get("date")
        if not professional_id or not day:
            raise InvalidInputError("professional_id e date são obrigatórios")

        dto = agenda_query_bus.dispatch(
            GetAvailableSlotsQuery(
                filtros={},
                professional_id=professional_id,
                date=day,
                clinic_id=clinic_scope(request),
            )
        )
        return Response(AvailableSlotsSerializer(dto).data, status=status.HTTP_200_OK)
