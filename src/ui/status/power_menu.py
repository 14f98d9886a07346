"""Power menu shown on the login screen."""

from typing import Any

from src.ui.base.base_indicator import MenuIndicator
from src.utils.constants import INDICATOR_POWER_MENU


class PowerMenuButton(MenuIndicator):
    """Suspend, restart and power-off actions, available before login."""

    ACTIONS = ("Suspend", "Restart", "Power Off")

    def __init__(self, master: Any, **kwargs):
        super().__init__(master, INDICATOR_POWER_MENU, **kwargs)

    def icon_text(self) -> str:
        return "Power"
