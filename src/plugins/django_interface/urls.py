from django.conf import settings
from django.urls import path
from drf_yasg import openapi
from drf_yasg.views import get_schema_view
from rest_framework import permissions

from .views.agenda_views import AvailableSlotsView
from .views.auth_views import HealthCheckView, LoginView, LogoutView
from .views.ortho_views import (
    GenerateInstallmentsView,
    OrthoCaseDetailView,
    OrthoCaseListCreateView,
    OrthoCaseTitlesView,
    PriceAdjustmentView,
)
from .views.receivable_views import RecordPaymentView

swagger_permissions = [permissions.AllowAny] if settings.DEBUG else [permissions.IsAuthenticated]

schema_view = get_schema_view(
    openapi.Info(
        title="Clínica - Agenda & Ortodontia",
        default_version="v1",
        description="Camada HTTP da arquitetura CQRS + Bus",
    ),
    public=settings.DEBUG,
    permission_classes=swagger_permissions,
)

urlpatterns = [
    path("login/",   LoginView.as_view(),       name="login"),
    path("logout/",  LogoutView.as_view(),      name="logout"),
    path("healthz/", HealthCheckView.as_view(), name="healthz"),

    # Agenda
    path("agenda/available-slots/", AvailableSlotsView.as_view(), name="available-slots"),

    # Ortodontia
    path("ortho/cases/", OrthoCaseListCreateView.as_view(), name="ortho-cases"),
    path("ortho/cases/<uuid:case_id>/", OrthoCaseDetailView.as_view(), name="ortho-case-detail"),
    path("ortho/cases/<uuid:case_id>/titles/", OrthoCaseTitlesView.as_view(), name="ortho-case-titles"),
    path("ortho/generate-installments/", GenerateInstallmentsView.as_view(), name="generate-installments"),
    path("ortho/price-adjustment/", PriceAdjustmentView.as_view(), name="price-adjustment"),

    # Contas a receber
    path("receivables/<uuid:title_id>/payments/", RecordPaymentView.as_view(), name="record-payment"),

    path("swagger/",     schema_view.with_ui("swagger", cache_timeout=0), name="swagger-ui"),
    path("swagger.json", schema_view.without_ui(cache_timeout=0),         name="swagger-json"),
]
