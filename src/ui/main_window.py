"""
Shell panel window.

Lays out the top panel according to the active session mode: the overview
button, app menu and calendar are shown only when the mode enables them, and
the status area shows the mode's indicators.
"""

from datetime import datetime
from tkinter import simpledialog
from typing import Any, Optional

import customtkinter as ctk

from src.services.mode_resolver import ActiveMode
from src.ui.status_area import StatusArea
from src.utils.constants import APP_NAME


class ShellWindow(ctk.CTk):
    """
    Top-level shell window prepared for one session mode.

    The window only prepares UI chrome; starting the session is left to
    ``ActiveMode.activate()``.
    """

    def __init__(self, active_mode: ActiveMode):
        """Initialize the shell window.

        Args:
            active_mode: Resolved mode the chrome is prepared for
        """
        super().__init__()
        self.active_mode = active_mode
        self.overview_button: Optional[ctk.CTkButton] = None
        self.app_menu_label: Optional[ctk.CTkLabel] = None
        self.last_command: Optional[str] = None

        self.title(f"{APP_NAME} - {active_mode.name}")
        self.geometry("1024x48")

        self.grid_columnconfigure(1, weight=1)
        self._create_panel()

        if active_mode.has_run_dialog:
            self.bind("<Alt-F2>", lambda event: self.show_run_dialog())

    def _create_panel(self):
        """Create the left, center and right panel boxes."""
        left_box = ctk.CTkFrame(self, fg_color="transparent")
        left_box.grid(row=0, column=0, sticky="w", padx=6)

        if self.active_mode.has_overview:
            self.overview_button = ctk.CTkButton(left_box, text="Activities", width=80)
            self.overview_button.pack(side="left", padx=2)

        if self.active_mode.has_app_menu:
            self.app_menu_label = ctk.CTkLabel(left_box, text="")
            self.app_menu_label.pack(side="left", padx=6)

        self.clock_label = ctk.CTkLabel(self, text=self._clock_text())
        self.clock_label.grid(row=0, column=1)

        self.status_area = StatusArea(self, self.active_mode.status_area)
        self.status_area.grid(row=0, column=2, sticky="e", padx=6)

    def _clock_text(self) -> str:
        now = datetime.now()
        if self.active_mode.show_calendar_events:
            return now.strftime("%a %b %d  %H:%M")
        return now.strftime("%H:%M")

    def set_focus_app(self, app_name: str) -> None:
        """Show the focused application's name in the app menu, if the mode has one."""
        if self.app_menu_label is not None:
            self.app_menu_label.configure(text=app_name)

    def show_run_dialog(self) -> Optional[Any]:
        """Prompt for a command to run. Does nothing if the mode has no run dialog."""
        if not self.active_mode.has_run_dialog:
            return None
        command = simpledialog.askstring("Run a Command", "Enter a command", parent=self)
        if command:
            self.last_command = command
        return command
