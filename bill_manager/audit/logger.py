"""
Audit Logger

DESIGN DECISION: Every significant action in a session is logged.
This provides:
1. Complete traceability of what happened to each bill
2. Debugging capability when terminal input misbehaves
3. A session history that tests can inspect

The audit logger:
- Writes structured lines to stderr, never to the interactive stdout
- Gracefully handles failures (doesn't crash the session if logging fails)
- Tags every event with the session's correlation ID
"""

import logging
import sys
from typing import Optional, TextIO
from uuid import UUID, uuid4

import structlog

from bill_manager.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity
from bill_manager.models.bill import Bill
from bill_manager.services.storage import AuditStorageInterface


PACKAGE_LOGGER_NAME = "bill_manager"


def _build_processors(json_format: bool = True) -> list:
    return [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer() if json_format
        else structlog.dev.ConsoleRenderer(colors=False),
    ]


# Configure structlog for local logging
structlog.configure(
    processors=_build_processors(),
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def configure_logging(
    level: str = "WARNING",
    json_format: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route the package's log output to stderr at the given level.

    Only the package logger is touched; the root logger is left alone.
    Call this before building the application components, since loggers
    are cached on first use.
    """
    structlog.configure(
        processors=_build_processors(json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False
    return package_logger


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage (for the session history), if configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the audit trail.
                    If None, only logs locally.
            correlation_id: Session identifier attached to every event.
                    A new one is created if not given.
        """
        self._storage = storage
        self._logger = structlog.get_logger(__name__)
        self.correlation_id = correlation_id or create_correlation_id()

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Persists to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity == AuditSeverity.ERROR:
            self._logger.error("audit_event", **log_dict)
        elif event.severity == AuditSeverity.WARNING:
            self._logger.warning("audit_event", **log_dict)
        elif event.severity == AuditSeverity.DEBUG:
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_session_started(self) -> None:
        self.log(AuditEventBuilder.session_started(self.correlation_id))

    def log_session_ended(self, bill_count: int) -> None:
        self.log(AuditEventBuilder.session_ended(self.correlation_id, bill_count))

    def log_session_interrupted(self) -> None:
        self.log(AuditEventBuilder.session_interrupted(self.correlation_id))

    def log_bill_added(self, bill: Bill, replaced: bool) -> None:
        """Log a bill being added (or replacing one with the same name)."""
        event = AuditEventBuilder.bill_added(
            name=bill.name,
            amount=bill.amount,
            replaced=replaced,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_bill_removed(self, name: str) -> None:
        event = AuditEventBuilder.bill_removed(
            name=name,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_bill_updated(
        self,
        name: str,
        old_amount: float,
        new_amount: float,
    ) -> None:
        event = AuditEventBuilder.bill_updated(
            name=name,
            old_amount=old_amount,
            new_amount=new_amount,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_bill_not_found(self, name: str, action: str) -> None:
        """Log a remove/update aimed at a name that is not stored."""
        event = AuditEventBuilder.bill_not_found(
            name=name,
            action=action,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_action_cancelled(self, action: str) -> None:
        event = AuditEventBuilder.action_cancelled(
            action=action,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_invalid_menu_choice(self, choice: str) -> None:
        event = AuditEventBuilder.invalid_menu_choice(
            choice=choice,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_invalid_amount(self, text: str, error_message: str) -> None:
        event = AuditEventBuilder.invalid_amount(
            text=text,
            error_message=error_message,
            correlation_id=self.correlation_id,
        )
        self.log(event)

    def log_input_read_error(self, error_message: str, attempts: int) -> None:
        """Log a terminal read that kept failing and was treated as cancel."""
        event = AuditEventBuilder.input_read_error(
            error_message=error_message,
            attempts=attempts,
            correlation_id=self.correlation_id,
        )
        self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One is created per interactive session.
    """
    return uuid4()
