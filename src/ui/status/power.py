"""Battery indicator."""

from typing import Any, Optional

from src.ui.base.base_indicator import BaseIndicator
from src.utils.constants import INDICATOR_BATTERY


class BatteryIndicator(BaseIndicator):
    """Battery charge percentage; hidden text when no battery is present."""

    def __init__(self, master: Any, percentage: Optional[int] = None, **kwargs):
        self.percentage = percentage
        self.charging = False
        super().__init__(master, INDICATOR_BATTERY, **kwargs)

    def icon_text(self) -> str:
        if self.percentage is None:
            return ""
        suffix = "+" if self.charging else ""
        return f"{self.percentage}%{suffix}"

    def update_charge(self, percentage: int, charging: bool = False) -> None:
        self.percentage = max(0, min(100, percentage))
        self.charging = charging
        self.refresh()
