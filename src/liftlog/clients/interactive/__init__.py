"""Interactive terminal client."""

from .client import MENU_ACTIONS, InteractiveClient, parse_number

__all__ = ["InteractiveClient", "MENU_ACTIONS", "parse_number"]
