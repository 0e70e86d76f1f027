"""
Domínio → ORM

⚑ Todas as tabelas de negócio carregam `clinic` (tenant)
⚑ Unicidade (UK) onde a regra de negócio exige escrita única
⚑ Índices nos filtros usados pelas rotinas de agenda e cobrança
"""

from __future__ import annotations

import uuid

from django.db import models
from django.db.models import Index, Q, UniqueConstraint
from django.db.models.functions import Lower


# ╭──────────────────────────────────────────────╮
# │ 1. Autenticação / Acesso                    │
# ╰──────────────────────────────────────────────╯
class User(models.Model):
    class Role(models.TextChoices):
        ADMIN = "admin", "Admin"
        CLINIC = "clinic", "Clinic"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=128)
    password_hash = models.CharField(max_length=128)
    name = models.CharField(max_length=100)
    is_active = models.BooleanField(default=True, db_index=True)
    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.CLINIC,
        db_index=True,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "users"
        indexes = [
            Index(Lower("email"), name="user_email_lower_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"


# ╭──────────────────────────────────────────────╮
# │ 2. Clínicas (tenants)                       │
# ╰──────────────────────────────────────────────╯
class Clinic(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    cnpj = models.CharField(max_length=18, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "clinics"
        constraints = [
            UniqueConstraint(Lower("name"), name="uq_clinic_name_lower")
        ]

    def __str__(self) -> str:
        return self.name


class UserClinic(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="clinic_links")
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="user_links")
    linked_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "user_clinics"
        unique_together = ("user", "clinic")


class ClinicSettings(models.Model):
    """
    `horario_funcionamento`:
    {"intervalo_padrao": 30, "dias": {"segunda": {"ativo": true, "inicio": "08:00",
     "fim": "18:00", "almoco_inicio": "12:00", "almoco_fim": "14:00"}, ...}}
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.OneToOneField(Clinic, on_delete=models.CASCADE, related_name="settings")
    horario_funcionamento = models.JSONField(blank=True, null=True)
    whatsapp = models.CharField(max_length=30, blank=True, null=True)
    email_contato = models.EmailField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "clinic_settings"


# ╭──────────────────────────────────────────────╮
# │ 3. Profissionais & Agenda                   │
# ╰──────────────────────────────────────────────╯
class Professional(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="professionals")
    name = models.CharField(max_length=255)
    active = models.BooleanField(default=True, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "professionals"

    def __str__(self) -> str:
        return self.name


class ProfessionalScheduleConfig(models.Model):
    """Agenda semanal do profissional; `dia_semana` 0 = domingo … 6 = sábado."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    professional = models.ForeignKey(
        Professional, on_delete=models.CASCADE, related_name="schedule_configs"
    )
    dia_semana = models.PositiveSmallIntegerField()
    hora_inicio = models.TimeField()
    hora_fim = models.TimeField()
    almoco_inicio = models.TimeField(blank=True, null=True)
    almoco_fim = models.TimeField(blank=True, null=True)
    duracao_consulta_minutos = models.PositiveIntegerField(default=30)
    ativo = models.BooleanField(default=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "professional_schedule_configs"
        constraints = [
            UniqueConstraint(fields=["professional", "dia_semana"], name="uq_prof_schedule_day"),
            models.CheckConstraint(condition=Q(dia_semana__lte=6), name="ck_prof_schedule_dia_semana"),
        ]


class Patient(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="patients")
    full_name = models.CharField(max_length=255)
    cpf = models.CharField(max_length=14, blank=True, null=True)
    phone = models.CharField(max_length=30, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "patients"
        indexes = [Index(fields=["clinic", "full_name"])]

    def __str__(self) -> str:
        return self.full_name


class Appointment(models.Model):
    class Status(models.TextChoices):
        SCHEDULED = "scheduled", "Agendado"
        CONFIRMED = "confirmed", "Confirmado"
        COMPLETED = "completed", "Concluído"
        CANCELLED = "cancelled", "Cancelado"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="appointments")
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="appointments")
    dentist = models.ForeignKey(Professional, on_delete=models.CASCADE, related_name="appointments")
    title = models.CharField(max_length=255, default="Consulta")
    appointment_date = models.DateTimeField()
    duration_minutes = models.PositiveIntegerField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.SCHEDULED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "appointments"
        indexes = [Index(fields=["dentist", "appointment_date"])]


# ╭──────────────────────────────────────────────╮
# │ 4. Ortodontia & Contas a Receber            │
# ╰──────────────────────────────────────────────╯
class OrthoCase(models.Model):
    class Status(models.TextChoices):
        ATIVO = "ativo", "Ativo"
        PAUSADO = "pausado", "Pausado"
        FINALIZADO = "finalizado", "Finalizado"
        CANCELADO = "cancelado", "Cancelado"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="ortho_cases")
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="ortho_cases")
    professional = models.ForeignKey(
        Professional, on_delete=models.SET_NULL, blank=True, null=True, related_name="ortho_cases"
    )
    tipo_tratamento = models.CharField(max_length=100, default="aparelho_fixo")
    data_inicio = models.DateField()
    valor_total = models.DecimalField(max_digits=14, decimal_places=2, default=0)
    valor_entrada = models.DecimalField(max_digits=14, decimal_places=2, blank=True, null=True)
    valor_mensalidade = models.DecimalField(max_digits=14, decimal_places=2, blank=True, null=True)
    dia_vencimento = models.PositiveSmallIntegerField(blank=True, null=True)
    total_meses = models.PositiveSmallIntegerField(blank=True, null=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ATIVO, db_index=True)
    observacoes = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "ortho_cases"
        indexes = [Index(fields=["clinic", "status"])]


class ReceivableTitle(models.Model):
    class Status(models.TextChoices):
        OPEN = "open", "Em aberto"
        PARTIAL = "partial", "Parcial"
        PAID = "paid", "Pago"
        CANCELLED = "cancelled", "Cancelado"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    clinic = models.ForeignKey(Clinic, on_delete=models.CASCADE, related_name="receivable_titles")
    patient = models.ForeignKey(Patient, on_delete=models.CASCADE, related_name="receivable_titles")
    ortho_case = models.ForeignKey(
        OrthoCase, on_delete=models.CASCADE, blank=True, null=True, related_name="titles"
    )
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    balance = models.DecimalField(max_digits=14, decimal_places=2)
    due_date = models.DateField(db_index=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.OPEN, db_index=True)
    origin = models.CharField(max_length=50, blank=True, null=True)
    notes = models.CharField(max_length=255, blank=True, null=True)
    installment_number = models.PositiveIntegerField(blank=True, null=True)
    total_installments = models.PositiveIntegerField(blank=True, null=True)
    payment_method = models.CharField(max_length=50, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "receivable_titles"
        constraints = [
            UniqueConstraint(
                fields=["ortho_case", "installment_number"],
                name="uq_title_ortho_case_installment",
                condition=Q(ortho_case__isnull=False),
            ),
        ]
        indexes = [
            Index(fields=["ortho_case", "status", "due_date"]),
        ]


class Payment(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.ForeignKey(ReceivableTitle, on_delete=models.PROTECT, related_name="payments")
    patient = models.ForeignKey(Patient, on_delete=models.PROTECT, related_name="payments")
    payment_date = models.DateTimeField()
    payment_method = models.CharField(max_length=50)
    value = models.DecimalField(max_digits=14, decimal_places=2)
    notes = models.TextField(blank=True, null=True)
    created_by = models.UUIDField(blank=True, null=True)
    status = models.CharField(max_length=20, default="completed")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "payments"


# ╭──────────────────────────────────────────────╮
# │ 5. Auditoria                                │
# ╰──────────────────────────────────────────────╯
class AuditLog(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField(blank=True, null=True, db_index=True)
    acao = models.CharField(max_length=100, db_index=True)
    modulo = models.CharField(max_length=50, blank=True, null=True)
    detalhes = models.JSONField(default=dict, blank=True)
    resultado = models.CharField(max_length=20, default="success")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "audit_logs"
        ordering = ["-created_at"]
