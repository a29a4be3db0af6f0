"""Shared fixtures for the bill manager tests."""

import io
import os

import pytest

from bill_manager.audit import AuditLogger
from bill_manager.config import get_settings
from bill_manager.console import InputReader
from bill_manager.menu import MenuController
from bill_manager.services.storage import InMemoryAuditStorage, InMemoryBillStorage


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run every test without BILL_MANAGER_* variables or a stray .env file."""
    for key in list(os.environ):
        if key.startswith("BILL_MANAGER_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def storage():
    return InMemoryBillStorage()


@pytest.fixture
def audit_storage():
    return InMemoryAuditStorage()


@pytest.fixture
def audit_logger(audit_storage):
    return AuditLogger(storage=audit_storage)


@pytest.fixture
def make_session(storage, audit_logger):
    """
    Build a controller over the shared store that reads the given text.

    Returns (controller, output_stream).
    """
    def _make(text: str):
        stdout = io.StringIO()
        reader = InputReader(
            stdin=io.StringIO(text),
            stdout=stdout,
            audit_logger=audit_logger,
        )
        controller = MenuController(storage, reader, audit_logger=audit_logger)
        return controller, stdout

    return _make
