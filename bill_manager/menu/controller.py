"""
Menu Controller

Drives the interactive session:
1. Show the menu
2. Read a choice (cancel here ends the whole session)
3. Run the chosen action, then show the menu again

Every action can be abandoned at any of its prompts by entering an empty
line; the store is only touched once all of an action's input is in.
"""

from typing import Optional

import structlog

from bill_manager.audit import AuditLogger
from bill_manager.console import InputReader
from bill_manager.menu.choices import MainMenu
from bill_manager.models.bill import Bill
from bill_manager.services.storage import BillStorageInterface


INVALID_CHOICE_MESSAGE = "Please enter valid input"
BILL_NAME_PROMPT = "Please enter bill name : "
BILL_AMOUNT_PROMPT = "Please enter bill amount : "
BILL_ADDED_MESSAGE = "Bill Added"
REMOVE_NAME_PROMPT = "Enter bill name to remove"
BILL_REMOVED_MESSAGE = "Bill removed successfully"
UPDATE_NAME_PROMPT = "Enter bill name"
UPDATE_AMOUNT_PROMPT = "Enter bill amount"
BILL_UPDATED_MESSAGE = "Bill updated successfully"
BILL_MISSING_MESSAGE = "Bill does not exist"


class MenuController:
    """
    Runs the bill menu loop against one store.

    The store is owned by whoever builds the controller and is passed in
    explicitly; the controller keeps no other state.
    """

    def __init__(
        self,
        storage: BillStorageInterface,
        reader: InputReader,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._storage = storage
        self._reader = reader
        self._audit_logger = audit_logger
        self._logger = structlog.get_logger(__name__)

    def run(self) -> None:
        """
        Loop until the user cancels at the menu prompt or input ends.
        """
        if self._audit_logger:
            self._audit_logger.log_session_started()

        while True:
            self.show_menu()
            choice = self._reader.read_line()
            if choice is None:
                break
            self.dispatch(choice)

        self._logger.debug("session_finished", bill_count=self._storage.count_bills())
        if self._audit_logger:
            self._audit_logger.log_session_ended(self._storage.count_bills())

    def show_menu(self) -> None:
        for line in MainMenu.render():
            self._reader.write(line)

    def dispatch(self, choice: str) -> None:
        """Run the action picked by the (trimmed) menu choice."""
        action = MainMenu.from_choice(choice)
        if action is MainMenu.ADD_NEW_BILL:
            self.add_bill()
        elif action is MainMenu.VIEW_EXISTING_BILLS:
            self.view_bills()
        elif action is MainMenu.REMOVE_BILL:
            self.remove_bill()
        elif action is MainMenu.UPDATE_BILL:
            self.update_bill()
        else:
            if self._audit_logger:
                self._audit_logger.log_invalid_menu_choice(choice)
            self._reader.write(INVALID_CHOICE_MESSAGE)

    def _cancelled(self, action: str) -> None:
        if self._audit_logger:
            self._audit_logger.log_action_cancelled(action)

    def add_bill(self) -> None:
        self._reader.write(BILL_NAME_PROMPT)
        name = self._reader.read_line()
        if name is None:
            self._cancelled("add")
            return

        self._reader.write(BILL_AMOUNT_PROMPT)
        amount = self._reader.read_amount()
        if amount is None:
            self._cancelled("add")
            return

        bill = Bill(name=name, amount=amount)
        replaced = self._storage.get_bill(name) is not None
        self._storage.add_bill(bill)
        if self._audit_logger:
            self._audit_logger.log_bill_added(bill, replaced)
        self._reader.write(BILL_ADDED_MESSAGE)

    def view_bills(self) -> None:
        """Print every bill; prints nothing when there are none."""
        for bill in self._storage.list_bills():
            self._reader.write(bill.to_display_line())

    def remove_bill(self) -> None:
        self.view_bills()
        self._reader.write(REMOVE_NAME_PROMPT)
        name = self._reader.read_line()
        if name is None:
            self._cancelled("remove")
            return

        if self._storage.remove_bill(name):
            if self._audit_logger:
                self._audit_logger.log_bill_removed(name)
            self._reader.write(BILL_REMOVED_MESSAGE)
        else:
            if self._audit_logger:
                self._audit_logger.log_bill_not_found(name, "remove")
            self._reader.write(BILL_MISSING_MESSAGE)

    def update_bill(self) -> None:
        self.view_bills()
        self._reader.write(UPDATE_NAME_PROMPT)
        name = self._reader.read_line()
        if name is None:
            self._cancelled("update")
            return

        self._reader.write(UPDATE_AMOUNT_PROMPT)
        amount = self._reader.read_amount()
        if amount is None:
            # The name entered above is discarded
            self._cancelled("update")
            return

        existing = self._storage.get_bill(name)
        old_amount = existing.amount if existing else None
        if self._storage.update_bill(name, amount):
            if self._audit_logger:
                self._audit_logger.log_bill_updated(name, old_amount, amount)
            self._reader.write(BILL_UPDATED_MESSAGE)
        else:
            if self._audit_logger:
                self._audit_logger.log_bill_not_found(name, "update")
            self._reader.write(BILL_MISSING_MESSAGE)
