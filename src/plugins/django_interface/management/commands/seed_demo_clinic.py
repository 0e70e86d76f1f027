from __future__ import annotations

import uuid
from datetime import time
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from clinica_core.adapters.config.composition_root import setup_di_container_from_settings
from clinica_core.core.domain.entities.user_entity import UserEntity
from plugins.django_interface.models import (
    Clinic,
    ClinicSettings,
    Patient,
    Professional,
    ProfessionalScheduleConfig,
    User,
    UserClinic,
)

# 1 = segunda … 5 = sexta
WEEKDAYS = range(1, 6)

DEFAULT_BUSINESS_HOURS = {
    "intervalo_padrao": 30,
    "dias": {
        "segunda": {"ativo": True, "inicio": "08:00", "fim": "18:00", "almoco_inicio": "12:00", "almoco_fim": "13:00"},
        "terca":   {"ativo": True, "inicio": "08:00", "fim": "18:00", "almoco_inicio": "12:00", "almoco_fim": "13:00"},
        "quarta":  {"ativo": True, "inicio": "08:00", "fim": "18:00", "almoco_inicio": "12:00", "almoco_fim": "13:00"},
        "quinta":  {"ativo": True, "inicio": "08:00", "fim": "18:00", "almoco_inicio": "12:00", "almoco_fim": "13:00"},
        "sexta":   {"ativo": True, "inicio": "08:00", "fim": "17:00"},
        "sabado":  {"ativo": True, "inicio": "08:00", "fim": "12:00"},
        "domingo": {"ativo": False},
    },
}


class Command(BaseCommand):
    """
    Popula uma clínica de demonstração: usuário da clínica, horário de
    funcionamento, um profissional com agenda semanal e um paciente.
    """
    help = "Cria (ou reaproveita) a clínica de demonstração para uso local."

    def add_arguments(self, parser) -> None:
        parser.add_argument("--clinic-name", type=str, default="Clínica Demo")
        parser.add_argument("--email", type=str, default="clinica@demo.local")
        parser.add_argument("--password", type=str, default="demo12345")

    @transaction.atomic
    def handle(self, *args: Any, **opt: Any) -> None:
        container = setup_di_container_from_settings(settings)

        clinic, created = Clinic.objects.get_or_create(name=opt["clinic_name"])
        ClinicSettings.objects.update_or_create(
            clinic=clinic,
            defaults={"horario_funcionamento": DEFAULT_BUSINESS_HOURS},
        )

        existing = container.user_repo().find_by_email(opt["email"])
        user = container.user_repo().save(
            UserEntity(
                id=existing.id if existing else uuid.uuid4(),
                email=opt["email"],
                name=f"Recepção {clinic.name}",
                password_hash=container.hash_service().hash_password(opt["password"]),
                role="clinic",
            )
        )
        UserClinic.objects.get_or_create(user=User.objects.get(id=user.id), clinic=clinic)

        professional, _ = Professional.objects.get_or_create(clinic=clinic, name="Dra. Ana Souza")
        for dia in WEEKDAYS:
            ProfessionalScheduleConfig.objects.update_or_create(
                professional=professional,
                dia_semana=dia,
                defaults={
                    "hora_inicio": time(8, 0),
                    "hora_fim": time(18, 0),
                    "almoco_inicio": time(12, 0),
                    "almoco_fim": time(13, 0),
                    "duracao_consulta_minutos": 30,
                    "ativo": True,
                },
            )

        Patient.objects.get_or_create(clinic=clinic, full_name="Paciente Demonstração")

        verb = "criada" if created else "atualizada"
        self.stdout.write(self.style.SUCCESS(
            f"✅ Clínica '{clinic.name}' {verb}. clinic_id={clinic.id} professional_id={professional.id}"
        ))
