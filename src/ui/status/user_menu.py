"""User menu button shown at the right end of the user session's status area."""

import getpass
from typing import Any, Optional

from src.ui.base.base_indicator import MenuIndicator
from src.utils.constants import INDICATOR_USER_MENU


class UserMenuButton(MenuIndicator):
    """Menu with the logged-in user's name (settings, lock, log out)."""

    ACTIONS = ("Settings", "Lock", "Log Out", "Power Off")

    def __init__(self, master: Any, user_name: Optional[str] = None, **kwargs):
        self.user_name = user_name or getpass.getuser()
        super().__init__(master, INDICATOR_USER_MENU, **kwargs)

    def icon_text(self) -> str:
        return self.user_name
