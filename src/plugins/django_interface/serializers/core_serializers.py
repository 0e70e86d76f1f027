# =========================================================
# Serializers de saída: recebem *entities* (dataclasses)
# e não modelos Django. A validação de entrada fica nos
# DTOs pydantic de cada contexto.
# =========================================================
from rest_framework import serializers


# ───────────────────────────────────────────────
# Agenda
# ───────────────────────────────────────────────
class AvailableSlotsSerializer(serializers.Serializer):
    professional_id = serializers.CharField()
    date            = serializers.CharField()
    slots           = serializers.ListField(child=serializers.CharField())


# ───────────────────────────────────────────────
# Ortodontia
# ───────────────────────────────────────────────
class OrthoCaseSerializer(serializers.Serializer):
    id                = serializers.UUIDField()
    clinic_id         = serializers.UUIDField()
    patient_id        = serializers.UUIDField()
    professional_id   = serializers.UUIDField(allow_null=True)
    tipo_tratamento   = serializers.CharField()
    data_inicio       = serializers.DateField()
    valor_total       = serializers.DecimalField(max_digits=14, decimal_places=2)
    valor_entrada     = serializers.DecimalField(max_digits=14, decimal_places=2, allow_null=True)
    valor_mensalidade = serializers.DecimalField(max_digits=14, decimal_places=2, allow_null=True)
    dia_vencimento    = serializers.IntegerField(allow_null=True)
    total_meses       = serializers.IntegerField(allow_null=True)
    status            = serializers.CharField()
    observacoes       = serializers.CharField(allow_null=True, allow_blank=True)
    created_at        = serializers.DateTimeField(allow_null=True)
    updated_at        = serializers.DateTimeField(allow_null=True)


# ───────────────────────────────────────────────
# Contas a receber
# ───────────────────────────────────────────────
class ReceivableTitleSerializer(serializers.Serializer):
    id                 = serializers.UUIDField()
    clinic_id          = serializers.UUIDField()
    patient_id         = serializers.UUIDField()
    ortho_case_id      = serializers.UUIDField(allow_null=True)
    amount             = serializers.DecimalField(max_digits=14, decimal_places=2)
    balance            = serializers.DecimalField(max_digits=14, decimal_places=2)
    due_date           = serializers.DateField()
    status             = serializers.CharField()
    origin             = serializers.CharField(allow_null=True)
    notes              = serializers.CharField(allow_null=True)
    installment_number = serializers.IntegerField(allow_null=True)
    total_installments = serializers.IntegerField(allow_null=True)
    payment_method     = serializers.CharField(allow_null=True)
