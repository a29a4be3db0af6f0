"""Interactive menu package."""

from bill_manager.menu.choices import MainMenu
from bill_manager.menu.controller import MenuController

__all__ = ["MainMenu", "MenuController"]
