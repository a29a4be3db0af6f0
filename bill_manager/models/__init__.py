"""
Data Models Package

This package contains the Pydantic models used by the bill manager.
"""

from bill_manager.models.bill import (
    Amount,
    Bill,
    amount_adapter,
    parse_amount,
)
from bill_manager.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Bill models
    "Amount",
    "Bill",
    "amount_adapter",
    "parse_amount",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
