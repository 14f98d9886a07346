"""BaseIndicator - Abstract base class for status-area indicators.

An indicator is a small widget shown in the shell's status area (battery,
volume, network, ...). Each indicator renders an icon label and, for menu
indicators, a button opening its actions.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import customtkinter as ctk


class BaseIndicator(ctk.CTkFrame, ABC):
    """Abstract base class for status-area indicators.

    Attributes:
        name: Indicator name as used in the status-area order
        icon_label: Label rendering the indicator's current icon text
    """

    def __init__(self, master: Any, name: str, **kwargs):
        """Initialize BaseIndicator.

        Args:
            master: Parent widget
            name: Indicator name (e.g., "volume", "battery")
            **kwargs: Additional arguments passed to CTkFrame
        """
        kwargs.setdefault("fg_color", "transparent")
        super().__init__(master, **kwargs)

        self.name = name
        self.icon_label = ctk.CTkLabel(self, text=self.icon_text(), width=24)
        self.icon_label.pack(side="left", padx=4)

    @abstractmethod
    def icon_text(self) -> str:
        """Text shown for the indicator's current state."""
        pass

    def refresh(self) -> None:
        """Re-render the icon from the indicator's current state."""
        self.icon_label.configure(text=self.icon_text())


class MenuIndicator(BaseIndicator):
    """Indicator that renders as a button opening a menu of actions."""

    def __init__(self, master: Any, name: str, **kwargs):
        self._menu_callback: Optional[Any] = kwargs.pop("command", None)
        super().__init__(master, name, **kwargs)
        self.icon_label.pack_forget()
        self.button = ctk.CTkButton(
            self,
            text=self.icon_text(),
            width=32,
            command=self.open_menu,
        )
        self.button.pack(side="left", padx=4)

    def open_menu(self) -> None:
        """Open the indicator's menu, delegating to the host if it supplied a command."""
        if self._menu_callback:
            self._menu_callback(self.name)

    def refresh(self) -> None:
        self.button.configure(text=self.icon_text())
