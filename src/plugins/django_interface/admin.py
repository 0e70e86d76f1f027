"""
Admin site registry
-------------------
Registra os modelos de forma dinâmica a partir de MODEL_ADMIN_REGISTRY.
"""

import structlog
from django.contrib import admin as django_admin

from . import models

logger = structlog.get_logger(__name__)

# ╭──────────────────────────────────────────────╮
# │ Configuração de cada ModelAdmin             │
# ╰──────────────────────────────────────────────╯
MODEL_ADMIN_REGISTRY: dict[type[models.models.Model], dict] = {
    # 1. Auth
    models.User: dict(
        list_display=("email", "name", "role", "is_active"),
        search_fields=("email", "name"),
        list_filter=("role", "is_active"),
    ),
    models.UserClinic: dict(
        list_display=("user", "clinic", "linked_at"),
        list_filter=("clinic",),
    ),
    # 2. Clínicas
    models.Clinic: dict(
        list_display=("name", "cnpj", "created_at"),
        search_fields=("name", "cnpj"),
    ),
    models.ClinicSettings: dict(
        list_display=("clinic", "whatsapp", "email_contato", "updated_at"),
    ),
    # 3. Agenda
    models.Professional: dict(
        list_display=("name", "clinic", "active"),
        list_filter=("clinic", "active"),
        search_fields=("name",),
    ),
    models.ProfessionalScheduleConfig: dict(
        list_display=("professional", "dia_semana", "hora_inicio", "hora_fim", "duracao_consulta_minutos", "ativo"),
        list_filter=("dia_semana", "ativo"),
    ),
    models.Patient: dict(
        list_display=("full_name", "cpf", "clinic"),
        list_filter=("clinic",),
        search_fields=("full_name", "cpf"),
    ),
    models.Appointment: dict(
        list_display=("patient", "dentist", "appointment_date", "duration_minutes", "status"),
        list_filter=("status", "clinic"),
    ),
    # 4. Ortodontia & Contas a Receber
    models.OrthoCase: dict(
        list_display=("patient", "clinic", "valor_mensalidade", "total_meses", "status"),
        list_filter=("status", "clinic"),
    ),
    models.ReceivableTitle: dict(
        list_display=("patient", "ortho_case", "installment_number", "due_date", "amount", "balance", "status"),
        list_filter=("status", "origin"),
    ),
    models.Payment: dict(
        list_display=("title", "payment_date", "payment_method", "value", "status"),
        list_filter=("payment_method",),
    ),
    # 5. Auditoria
    models.AuditLog: dict(
        list_display=("acao", "modulo", "user_id", "resultado", "created_at"),
        list_filter=("acao", "modulo"),
    ),
}

# ╭──────────────────────────────────────────────╮
# │ Registro dinâmico                           │
# ╰──────────────────────────────────────────────╯
for model, opts in MODEL_ADMIN_REGISTRY.items():
    admin_class = type(f"{model.__name__}Admin", (django_admin.ModelAdmin,), opts)
    django_admin.site.register(model, admin_class)
    logger.debug("Registered model in admin", model=model.__name__)
