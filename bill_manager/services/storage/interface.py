"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the menu decoupled from how bills are held
2. Add a persistent backend later without touching the handlers
3. Substitute fakes in tests

The interface is intentionally simple - just the four operations the menu
needs plus two read helpers. Everything is synchronous: the application is a
single-threaded terminal loop.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bill_manager.models.bill import Bill
from bill_manager.models.audit import AuditEvent


class BillStorageInterface(ABC):
    """
    Abstract interface for bill storage operations.

    Bills are keyed by name. At most one bill exists per name.
    """

    @abstractmethod
    def add_bill(self, bill: Bill) -> None:
        """
        Insert a bill, replacing any existing bill with the same name.

        Last write wins; fields are never merged. Always succeeds.
        """
        pass

    @abstractmethod
    def list_bills(self) -> list[Bill]:
        """
        List every bill currently stored.

        Returns:
            All bills, in no particular order
        """
        pass

    @abstractmethod
    def remove_bill(self, name: str) -> bool:
        """
        Remove the bill with the given name.

        Args:
            name: The bill's name

        Returns:
            True if a bill was removed, False if none existed
        """
        pass

    @abstractmethod
    def update_bill(self, name: str, amount: float) -> bool:
        """
        Change the amount of an existing bill.

        Never creates a bill.

        Args:
            name: The bill's name
            amount: The new amount

        Returns:
            True if the bill existed and was updated, False otherwise
        """
        pass

    @abstractmethod
    def get_bill(self, name: str) -> Optional[Bill]:
        """
        Retrieve a bill by name.

        Returns:
            The bill if found, None otherwise
        """
        pass

    @abstractmethod
    def count_bills(self) -> int:
        """Number of bills currently stored."""
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """
        Get all events for a correlation ID (one interactive session).

        Returns:
            List of related events in chronological order
        """
        pass

    @abstractmethod
    def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: str,
    ) -> list[AuditEvent]:
        """
        Get all events for a specific entity.

        Args:
            entity_type: Type of entity (e.g., 'bill', 'session')
            entity_id: The entity's key (a bill name for bills)

        Returns:
            List of events in chronological order
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass
