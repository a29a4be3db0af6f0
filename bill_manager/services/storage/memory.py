"""
In-Memory Storage Implementation

DESIGN DECISION: Bills live in a plain dict keyed by name for the lifetime of
the process:
1. Name lookup is the dominant access pattern (remove, update)
2. Replacing on add is a single assignment
3. Nothing outlives the session, so there is nothing to flush

TRADEOFFS:
- Everything is lost at exit (intended)
- No locking; the store has a single owner on a single thread
"""

from typing import Optional
from uuid import UUID

from bill_manager.models.bill import Bill
from bill_manager.models.audit import AuditEvent
from bill_manager.services.storage.interface import (
    AuditStorageInterface,
    BillStorageInterface,
)


class InMemoryBillStorage(BillStorageInterface):
    """Bill storage backed by a dict of name -> Bill."""

    def __init__(self):
        self._bills: dict[str, Bill] = {}

    def add_bill(self, bill: Bill) -> None:
        self._bills[bill.name] = bill

    def list_bills(self) -> list[Bill]:
        return list(self._bills.values())

    def remove_bill(self, name: str) -> bool:
        return self._bills.pop(name, None) is not None

    def update_bill(self, name: str, amount: float) -> bool:
        bill = self._bills.get(name)
        if bill is None:
            return False
        # validate_assignment on the model rejects non-finite amounts
        bill.amount = amount
        return True

    def get_bill(self, name: str) -> Optional[Bill]:
        return self._bills.get(name)

    def count_bills(self) -> int:
        return len(self._bills)

    def __len__(self) -> int:
        return len(self._bills)

    def __contains__(self, name: object) -> bool:
        return name in self._bills


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only audit log kept for the current session."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: str,
    ) -> list[AuditEvent]:
        return [
            e for e in self._events
            if e.entity_type == entity_type and e.entity_id == entity_id
        ]

    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
