"""
Audit Models for Bill Manager

Every significant action in a session is recorded as an audit event.
This provides:
1. A trace of what the user did during the session
2. Debugging information when input goes wrong
3. A way to reconstruct the store's history for one session

DESIGN DECISION: Audit logs are append-only. We never delete or modify them.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Every menu action and every rejected input has its own event type.
    """
    # Session lifecycle
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"
    SESSION_INTERRUPTED = "session_interrupted"

    # Store changes
    BILL_ADDED = "bill_added"
    BILL_REMOVED = "bill_removed"
    BILL_UPDATED = "bill_updated"
    BILL_NOT_FOUND = "bill_not_found"

    # User input
    ACTION_CANCELLED = "action_cancelled"
    INVALID_MENU_CHOICE = "invalid_menu_choice"
    INVALID_AMOUNT = "invalid_amount"
    INPUT_READ_ERROR = "input_read_error"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of our audit trail.
    Every significant action creates one of these.
    """

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - bills are keyed by name, so the entity id is the name
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'bill', 'session')"
    )
    entity_id: Optional[str] = Field(
        default=None,
        description="Key of the entity this event relates to"
    )

    # Correlation - one id per interactive session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID to correlate events from the same session"
    )

    # Unbounded: descriptions embed user-typed bill names
    description: str = Field(
        ...,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.bill_added("rent", 1200.0, replaced=False, correlation_id=session_id)
        event = AuditEventBuilder.action_cancelled("add", correlation_id=session_id)
    """

    @staticmethod
    def session_started(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            entity_id=str(correlation_id),
            correlation_id=correlation_id,
            description="Bill manager session started",
        )

    @staticmethod
    def session_ended(correlation_id: UUID, bill_count: int) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            entity_type="session",
            entity_id=str(correlation_id),
            correlation_id=correlation_id,
            description=f"Session ended with {bill_count} bills in memory",
            details={
                "bill_count": bill_count,
            },
            is_user_action=True,
        )

    @staticmethod
    def session_interrupted(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_INTERRUPTED,
            severity=AuditSeverity.WARNING,
            entity_type="session",
            entity_id=str(correlation_id),
            correlation_id=correlation_id,
            description="Session interrupted by the user",
            is_user_action=True,
        )

    @staticmethod
    def bill_added(
        name: str,
        amount: float,
        replaced: bool,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        verb = "replaced" if replaced else "added"
        return AuditEvent(
            event_type=AuditEventType.BILL_ADDED,
            entity_type="bill",
            entity_id=name,
            correlation_id=correlation_id,
            description=f"Bill {verb}: {name} - {amount}",
            details={
                "amount": amount,
                "replaced": replaced,
            },
            is_user_action=True,
        )

    @staticmethod
    def bill_removed(
        name: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_REMOVED,
            entity_type="bill",
            entity_id=name,
            correlation_id=correlation_id,
            description=f"Bill removed: {name}",
            is_user_action=True,
        )

    @staticmethod
    def bill_updated(
        name: str,
        old_amount: float,
        new_amount: float,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_UPDATED,
            entity_type="bill",
            entity_id=name,
            correlation_id=correlation_id,
            description=f"Bill updated: {name} - {old_amount} -> {new_amount}",
            details={
                "old_amount": old_amount,
                "new_amount": new_amount,
            },
            is_user_action=True,
        )

    @staticmethod
    def bill_not_found(
        name: str,
        action: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_NOT_FOUND,
            severity=AuditSeverity.WARNING,
            entity_type="bill",
            entity_id=name,
            correlation_id=correlation_id,
            description=f"Cannot {action} bill '{name}': it does not exist",
            details={
                "action": action,
            },
            is_user_action=True,
        )

    @staticmethod
    def action_cancelled(
        action: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACTION_CANCELLED,
            correlation_id=correlation_id,
            description=f"User cancelled the {action} action",
            details={
                "action": action,
            },
            is_user_action=True,
        )

    @staticmethod
    def invalid_menu_choice(
        choice: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_MENU_CHOICE,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Unrecognised menu choice",
            details={
                "choice": choice,
            },
            is_user_action=True,
        )

    @staticmethod
    def invalid_amount(
        text: str,
        error_message: str,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_AMOUNT,
            severity=AuditSeverity.WARNING,
            correlation_id=correlation_id,
            description="Amount could not be parsed as a number",
            details={
                "input": text,
            },
            error_message=error_message,
            is_user_action=True,
        )

    @staticmethod
    def input_read_error(
        error_message: str,
        attempts: int,
        correlation_id: Optional[UUID] = None
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_READ_ERROR,
            severity=AuditSeverity.ERROR,
            correlation_id=correlation_id,
            description=f"Reading input failed after {attempts} attempts",
            details={
                "attempts": attempts,
            },
            error_message=error_message,
        )
