"""Status-area indicator widgets.

Each indicator is a customtkinter frame referenced by name from a session
mode's status-area configuration:
- a11y: ATIndicator
- keyboard: XKBIndicator
- volume: VolumeIndicator
- bluetooth: BluetoothIndicator
- network: NetworkIndicator (optional, probed at registry construction)
- battery: BatteryIndicator
- userMenu: UserMenuButton
- powerMenu: PowerMenuButton
"""

from .accessibility import ATIndicator
from .keyboard import XKBIndicator
from .volume import VolumeIndicator
from .bluetooth import BluetoothIndicator
from .power import BatteryIndicator
from .user_menu import UserMenuButton
from .power_menu import PowerMenuButton

__all__ = [
    "ATIndicator",
    "XKBIndicator",
    "VolumeIndicator",
    "BluetoothIndicator",
    "BatteryIndicator",
    "UserMenuButton",
    "PowerMenuButton",
]
