"""Bluetooth indicator.

Only registered when the build declares bluetooth support
(SHELL_HAVE_BLUETOOTH).
"""

from typing import Any

from src.ui.base.base_indicator import BaseIndicator
from src.utils.constants import INDICATOR_BLUETOOTH


class BluetoothIndicator(BaseIndicator):
    """Bluetooth adapter state and connected device count."""

    def __init__(self, master: Any, **kwargs):
        self.powered = True
        self.connected_devices = 0
        super().__init__(master, INDICATOR_BLUETOOTH, **kwargs)

    def icon_text(self) -> str:
        if not self.powered:
            return "BT off"
        if self.connected_devices:
            return f"BT {self.connected_devices}"
        return "BT"

    def set_connected_devices(self, count: int) -> None:
        self.connected_devices = max(0, count)
        self.refresh()
