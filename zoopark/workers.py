"""Zoo staff."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WorkerRole(Enum):
    DIRECTOR = "director"
    VETERINARIAN = "veterinarian"
    CLEANER = "cleaner"
    FOODMEN = "foodmen"


_ROLE_LABELS = {
    WorkerRole.DIRECTOR: "Директор",
    WorkerRole.VETERINARIAN: "Ветеринар",
    WorkerRole.CLEANER: "Уборщик",
    WorkerRole.FOODMEN: "Кормилец",
}


@dataclass(eq=False)
class Worker:
    """A member of staff with a daily salary."""

    name: str
    price: int
    role: WorkerRole
    served: int
    id: int
    is_working: bool = True

    def role_label(self) -> str:
        return _ROLE_LABELS.get(self.role, "Неизвестно")

    def start_day(self) -> None:
        """Make the worker available again for a new day."""
        self.is_working = True