"""Volume indicator."""

from typing import Any

from src.ui.base.base_indicator import BaseIndicator
from src.utils.constants import INDICATOR_VOLUME


class VolumeIndicator(BaseIndicator):
    """Output volume level, 0-100, with mute."""

    def __init__(self, master: Any, level: int = 50, **kwargs):
        self.level = max(0, min(100, level))
        self.muted = False
        super().__init__(master, INDICATOR_VOLUME, **kwargs)

    def icon_text(self) -> str:
        if self.muted or self.level == 0:
            return "Vol -"
        return f"Vol {self.level}"

    def set_level(self, level: int) -> None:
        """Set volume, clamped to 0-100."""
        self.level = max(0, min(100, level))
        self.refresh()

    def toggle_mute(self) -> None:
        self.muted = not self.muted
        self.refresh()
