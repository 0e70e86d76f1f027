"""Construtores de dados de teste (modelos Django + cliente autenticado)."""
from __future__ import annotations

from datetime import date, time
from decimal import Decimal

from rest_framework.test import APIClient

from clinica_core.adapters.security.hash_service import HashService
from clinica_core.adapters.security.jwt_service import JWTService
from plugins.django_interface.models import (
    Clinic,
    OrthoCase,
    Patient,
    Professional,
    ProfessionalScheduleConfig,
    ReceivableTitle,
    User,
    UserClinic,
)

DEFAULT_PASSWORD = "secret123"


def make_clinic(name: str = "Clínica Teste") -> Clinic:
    return Clinic.objects.create(name=name)


def make_user(role: str = "clinic", clinic: Clinic | None = None, email: str | None = None) -> User:
    user = User.objects.create(
        email=email or f"{role}-{User.objects.count() + 1}@example.com",
        password_hash=HashService.hash_password(DEFAULT_PASSWORD),
        name=f"Usuário {role}",
        role=role,
    )
    if clinic is not None:
        UserClinic.objects.create(user=user, clinic=clinic)
    return user


def auth_client(user: User, clinic: Clinic | None = None) -> APIClient:
    """APIClient com `Authorization: Bearer <jwt>` para o usuário."""
    token = JWTService.create_token(
        subject=str(user.id),
        expires_in=3600,
        role=user.role,
        clinic_id=str(clinic.id) if clinic else None,
    )
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


def make_patient(clinic: Clinic, name: str = "Maria Silva") -> Patient:
    return Patient.objects.create(clinic=clinic, full_name=name)


def make_professional(clinic: Clinic, name: str = "Dr. João") -> Professional:
    return Professional.objects.create(clinic=clinic, name=name)


def make_schedule(
    professional: Professional,
    dia_semana: int,
    start: time = time(8, 0),
    end: time = time(12, 0),
    interval: int = 30,
    ativo: bool = True,
    lunch: tuple[time, time] | None = None,
) -> ProfessionalScheduleConfig:
    return ProfessionalScheduleConfig.objects.create(
        professional=professional,
        dia_semana=dia_semana,
        hora_inicio=start,
        hora_fim=end,
        almoco_inicio=lunch[0] if lunch else None,
        almoco_fim=lunch[1] if lunch else None,
        duracao_consulta_minutos=interval,
        ativo=ativo,
    )


def make_case(
    clinic: Clinic,
    patient: Patient | None = None,
    *,
    valor_mensalidade: str | None = "500.00",
    total_meses: int | None = 12,
    dia_vencimento: int | None = 10,
    valor_entrada: str | None = None,
    data_inicio: date = date(2024, 1, 31),
    status: str = OrthoCase.Status.ATIVO,
) -> OrthoCase:
    return OrthoCase.objects.create(
        clinic=clinic,
        patient=patient or make_patient(clinic),
        data_inicio=data_inicio,
        valor_total=Decimal("6000.00"),
        valor_entrada=Decimal(valor_entrada) if valor_entrada is not None else None,
        valor_mensalidade=Decimal(valor_mensalidade) if valor_mensalidade is not None else None,
        dia_vencimento=dia_vencimento,
        total_meses=total_meses,
        status=status,
    )


def make_title(
    case: OrthoCase,
    due_date: date,
    *,
    amount: str = "500.00",
    balance: str | None = None,
    status: str = ReceivableTitle.Status.OPEN,
    installment_number: int | None = None,
) -> ReceivableTitle:
    return ReceivableTitle.objects.create(
        clinic=case.clinic,
        patient=case.patient,
        ortho_case=case,
        amount=Decimal(amount),
        balance=Decimal(balance if balance is not None else amount),
        due_date=due_date,
        status=status,
        origin="ortodontia",
        installment_number=installment_number,
    )
