from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class BookingEntity:
    """Agendamento não cancelado ocupando um intervalo contínuo."""
    start: datetime
    duration_minutes: int | None = None

    @property
    def start_minute(self) -> int:
        return self.start.hour * 60 + self.start.minute
