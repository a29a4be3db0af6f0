"""
Storage Services Package

Provides abstract interfaces and the in-memory implementations used for a
terminal session. Designed so a persistent backend can be swapped in.
"""

from bill_manager.services.storage.interface import (
    AuditStorageInterface,
    BillStorageInterface,
)
from bill_manager.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryBillStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "BillStorageInterface",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemoryBillStorage",
]
