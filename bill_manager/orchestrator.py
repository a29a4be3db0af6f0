"""
Main Orchestrator for Bill Manager

This module ties the components together and runs one interactive session:
settings -> logging -> store + reader + audit -> menu loop -> exit code.

DESIGN DECISION: The bill store is created here and handed to the menu
controller explicitly. There is no module-level store; each call to
create_app_components() starts from an empty session.
"""

import sys
from typing import Optional, TextIO

import structlog

from bill_manager.audit import AuditLogger, configure_logging
from bill_manager.config import Settings, get_settings
from bill_manager.console import InputReader
from bill_manager.menu import MenuController
from bill_manager.services.storage import (
    BillStorageInterface,
    InMemoryAuditStorage,
    InMemoryBillStorage,
)


EXIT_OK = 0
EXIT_INTERRUPTED = 130


def create_app_components(
    settings: Optional[Settings] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> tuple[MenuController, BillStorageInterface, AuditLogger]:
    """
    Create all application components.

    Returns:
        (controller, bill_storage, audit_logger)
    """
    settings = settings or get_settings()
    app_settings = settings.app

    audit_storage = InMemoryAuditStorage() if app_settings.audit_enabled else None
    audit_logger = AuditLogger(storage=audit_storage)

    bill_storage = InMemoryBillStorage()
    reader = InputReader(
        stdin=stdin,
        stdout=stdout,
        retry_attempts=app_settings.input_retry_attempts,
        audit_logger=audit_logger,
    )
    controller = MenuController(
        storage=bill_storage,
        reader=reader,
        audit_logger=audit_logger,
    )

    return controller, bill_storage, audit_logger


def run_program(
    settings: Optional[Settings] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Run one session and return the process exit code.

    Cancelling at the menu (or closing input) is a normal, successful exit.
    """
    controller, _, audit_logger = create_app_components(
        settings=settings,
        stdin=stdin,
        stdout=stdout,
    )

    try:
        controller.run()
    except KeyboardInterrupt:
        audit_logger.log_session_interrupted()
        print(file=stdout if stdout is not None else sys.stdout)
        return EXIT_INTERRUPTED

    return EXIT_OK


def main() -> None:
    """Console entry point."""
    settings = get_settings()
    configure_logging(
        level=settings.effective_log_level,
        json_format=settings.logging.json_format,
    )
    structlog.get_logger(__name__).debug(
        "starting",
        environment=settings.app.app_environment,
    )
    sys.exit(run_program(settings=settings))
