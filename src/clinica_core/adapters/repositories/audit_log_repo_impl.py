from clinica_core.core.domain.entities.audit_log_entity import AuditLogEntity
from clinica_core.core.domain.repositories.audit_log_repository import AuditLogRepository
from plugins.django_interface.models import AuditLog as AuditLogModel


class AuditLogRepoImpl(AuditLogRepository):
    def add(self, entry: AuditLogEntity) -> AuditLogEntity:
        m = AuditLogModel.objects.create(
            id=entry.id,
            user_id=entry.user_id,
            acao=entry.acao,
            modulo=entry.modulo,
            detalhes=entry.detalhes,
            resultado=entry.resultado,
        )
        return AuditLogEntity.from_model(m)
