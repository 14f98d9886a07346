"""Keyboard layout indicator."""

from typing import Any, List, Optional

from src.ui.base.base_indicator import BaseIndicator
from src.utils.constants import INDICATOR_KEYBOARD


class XKBIndicator(BaseIndicator):
    """Shows the active keyboard layout and cycles through configured layouts."""

    def __init__(self, master: Any, layouts: Optional[List[str]] = None, **kwargs):
        self.layouts = layouts or ["us"]
        self.current_index = 0
        super().__init__(master, INDICATOR_KEYBOARD, **kwargs)

    def icon_text(self) -> str:
        return self.layouts[self.current_index]

    def next_layout(self) -> str:
        """Switch to the next layout and return its name."""
        self.current_index = (self.current_index + 1) % len(self.layouts)
        self.refresh()
        return self.layouts[self.current_index]
