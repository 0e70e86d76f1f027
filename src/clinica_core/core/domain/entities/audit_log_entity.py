from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from clinica_core.core.domain.entities._base import EntityMixin


@dataclass(slots=True)
class AuditLogEntity(EntityMixin):
    """Registro de auditoria de uma ação privilegiada."""
    user_id: uuid.UUID | None
    acao: str
    modulo: str
    detalhes: dict[str, Any] = field(default_factory=dict)
    resultado: str = "success"
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    created_at: datetime | None = None
