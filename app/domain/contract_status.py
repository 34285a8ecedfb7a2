from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ContractStatus(str, Enum):
    PENDING = "Pending"
    ACTIVE = "Active"
    COMPLETED = "Completed"
    CANCELED = "Canceled"


@dataclass(frozen=True, slots=True)
class ContractStatusPolicy:
    """Defines which status changes a rental contract may go through.

    Semantics (intentionally centralized):
    - Pending -> Active, Pending -> Canceled
    - Active -> Completed, Active -> Canceled
    - Completed and Canceled are final.
    """

    transitions: tuple[tuple[ContractStatus, ContractStatus], ...] = (
        (ContractStatus.PENDING, ContractStatus.ACTIVE),
        (ContractStatus.PENDING, ContractStatus.CANCELED),
        (ContractStatus.ACTIVE, ContractStatus.COMPLETED),
        (ContractStatus.ACTIVE, ContractStatus.CANCELED),
    )

    def can_transition(self, *, current: str, target: ContractStatus) -> bool:
        try:
            current_status = ContractStatus(current)
        except ValueError:
            return False
        return (current_status, target) in self.transitions

    def is_final(self, status: str) -> bool:
        return status in (ContractStatus.COMPLETED.value, ContractStatus.CANCELED.value)
