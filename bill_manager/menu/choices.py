"""
Main menu choices.

The four actions form a closed set. Text that is not one of them parses to
None and is reported as invalid input by the controller.
"""

from enum import Enum
from typing import Optional


MENU_HEADER = "========Main Menu==========="
MENU_FOOTER = "============================"
MENU_PROMPT = "Enter your choice "


class MainMenu(str, Enum):
    """Menu actions, valued by the text the user types to pick them."""
    ADD_NEW_BILL = "1"
    VIEW_EXISTING_BILLS = "2"
    REMOVE_BILL = "3"
    UPDATE_BILL = "4"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_choice(cls, text: str) -> Optional["MainMenu"]:
        """Parse a trimmed menu choice; None if it is not recognised."""
        try:
            return cls(text)
        except ValueError:
            return None

    @classmethod
    def render(cls) -> list[str]:
        """Lines of the menu, including the blank spacer and the prompt."""
        lines = ["", MENU_HEADER]
        lines.extend(f"{choice.value}. {choice.label}" for choice in cls)
        lines.extend([MENU_FOOTER, MENU_PROMPT])
        return lines


_LABELS = {
    MainMenu.ADD_NEW_BILL: "Add New Bill",
    MainMenu.VIEW_EXISTING_BILLS: "View Existing Bills",
    MainMenu.REMOVE_BILL: "Remove Existing Bill",
    MainMenu.UPDATE_BILL: "Update Existing Bill",
}
