"""StatusArea - the row of indicator widgets at the right of the shell panel.

Indicators are constructed from the active mode's status-area config and
packed left to right in its order.
"""

from typing import Any, Dict, Optional

import customtkinter as ctk

from src.services.mode_registry import StatusAreaConfig
from src.ui.base.base_indicator import BaseIndicator


class StatusArea(ctk.CTkFrame):
    """Container for the active mode's status-area indicators.

    Attributes:
        indicators: Indicator name -> constructed widget, in placement order
    """

    def __init__(self, master: Any, status_area: Optional[StatusAreaConfig], **kwargs):
        """Initialize StatusArea.

        Args:
            master: Parent widget
            status_area: Status-area config of the active mode; None shows nothing
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(master, **kwargs)
        self.indicators: Dict[str, BaseIndicator] = {}

        if status_area is None:
            return

        for name in status_area.order:
            indicator_class = status_area.implementation[name]
            indicator = indicator_class(self)
            indicator.pack(side="left", padx=2)
            self.indicators[name] = indicator

    def get_indicator(self, name: str) -> Optional[BaseIndicator]:
        """Get an indicator widget by name.

        Args:
            name: Indicator name

        Returns:
            The indicator widget, or None if it is not shown in this mode
        """
        return self.indicators.get(name)

    def refresh(self) -> None:
        """Refresh every indicator's icon."""
        for indicator in self.indicators.values():
            indicator.refresh()
