from abc import ABC, abstractmethod

from clinica_core.core.domain.entities.audit_log_entity import AuditLogEntity


class AuditLogRepository(ABC):
    @abstractmethod
    def add(self, entry: AuditLogEntity) -> AuditLogEntity:
        """Persiste um registro de auditoria."""
        ...
