from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class AvailableSlotsDTO:
    professional_id: str
    date: str
    slots: list[str] = field(default_factory=list)
