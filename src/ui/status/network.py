"""Network indicator backed by NetworkManager.

The indicator is optional: it is only registered when ``is_supported()``
reports a NetworkManager command-line client on the host.
"""

import shutil
from typing import Any

from src.ui.base.base_indicator import BaseIndicator
from src.utils.constants import INDICATOR_NETWORK

NMCLI = "nmcli"


def is_supported() -> bool:
    """Check whether NetworkManager's client is available on this host."""
    return shutil.which(NMCLI) is not None


class NetworkIndicator(BaseIndicator):
    """Connectivity state of the primary connection."""

    STATES = ("disconnected", "connecting", "connected")

    def __init__(self, master: Any, **kwargs):
        self.state = "disconnected"
        super().__init__(master, INDICATOR_NETWORK, **kwargs)

    def icon_text(self) -> str:
        return {"disconnected": "Net x", "connecting": "Net ...", "connected": "Net"}[self.state]

    def set_state(self, state: str) -> None:
        if state not in self.STATES:
            raise ValueError(f"Invalid network state: {state}. Must be one of {self.STATES}")
        self.state = state
        self.refresh()
