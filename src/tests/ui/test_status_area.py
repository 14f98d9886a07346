"""Tests for the status area and indicator widgets."""

import os
import sys

import pytest

from src.services.mode_registry import ModeRegistry
from src.services.mode_resolver import resolve


@pytest.fixture
def ctk_root():
    """Create a CTk root window for widget testing."""
    import customtkinter as ctk

    if os.environ.get("SHELL_UI_TESTS") != "1":
        if sys.platform != "win32" and not (
            os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
        ):
            pytest.skip("UI tests require a display; set SHELL_UI_TESTS=1 to force")

    try:
        root = ctk.CTk()
    except Exception as exc:  # pragma: no cover
        pytest.skip(f"CTk unavailable in this environment: {exc}")
    root.withdraw()
    yield root
    root.destroy()


@pytest.fixture
def widget_registry():
    from src.ui.status import BatteryIndicator, PowerMenuButton, VolumeIndicator

    return ModeRegistry.from_dict(
        {
            "user": {
                "hasRunDialog": True,
                "statusArea": {
                    "order": ["volume", "battery"],
                    "implementation": {
                        "volume": VolumeIndicator,
                        "battery": BatteryIndicator,
                        "powerMenu": PowerMenuButton,
                    },
                },
            },
            "login": {
                "statusArea": {
                    "order": ["battery", "powerMenu"],
                    "implementation": {
                        "battery": BatteryIndicator,
                        "powerMenu": PowerMenuButton,
                    },
                },
            },
        },
        default_name="user",
    )


class TestStatusArea:
    def test_builds_indicators_in_order(self, ctk_root, widget_registry):
        from src.ui.status_area import StatusArea

        active = resolve("user", widget_registry, "user")
        area = StatusArea(ctk_root, active.status_area)
        assert list(area.indicators) == ["volume", "battery"]
        assert area.get_indicator("powerMenu") is None

    def test_login_mode_shows_power_menu(self, ctk_root, widget_registry):
        from src.ui.status import PowerMenuButton
        from src.ui.status_area import StatusArea

        active = resolve("login", widget_registry, "user")
        area = StatusArea(ctk_root, active.status_area)
        assert isinstance(area.get_indicator("powerMenu"), PowerMenuButton)

    def test_no_status_area_is_empty(self, ctk_root):
        from src.ui.status_area import StatusArea

        assert StatusArea(ctk_root, None).indicators == {}


class TestIndicators:
    def test_volume_clamps_and_mutes(self, ctk_root):
        from src.ui.status import VolumeIndicator

        volume = VolumeIndicator(ctk_root, level=150)
        assert volume.level == 100
        volume.toggle_mute()
        assert volume.icon_label.cget("text") == "Vol -"

    def test_battery_without_battery_shows_nothing(self, ctk_root):
        from src.ui.status import BatteryIndicator

        battery = BatteryIndicator(ctk_root)
        assert battery.icon_text() == ""
        battery.update_charge(42, charging=True)
        assert battery.icon_text() == "42%+"

    def test_keyboard_cycles_layouts(self, ctk_root):
        from src.ui.status import XKBIndicator

        keyboard = XKBIndicator(ctk_root, layouts=["us", "de"])
        assert keyboard.next_layout() == "de"
        assert keyboard.next_layout() == "us"

    def test_accessibility_toggle(self, ctk_root):
        from src.ui.status import ATIndicator

        a11y = ATIndicator(ctk_root)
        assert a11y.toggle("Large Text") is True
        assert a11y.icon_text() == "A11y*"
        with pytest.raises(ValueError):
            a11y.toggle("Magnifier")

    def test_menu_indicator_delegates_to_command(self, ctk_root):
        from src.ui.status import UserMenuButton

        opened = []
        menu = UserMenuButton(ctk_root, user_name="alex", command=opened.append)
        menu.open_menu()
        assert opened == ["userMenu"]
        assert menu.button.cget("text") == "alex"


class TestShellWindow:
    def test_login_chrome_hides_overview(self, ctk_root):
        from src.ui.main_window import ShellWindow

        registry = ModeRegistry.from_dict(
            {"user": {"hasOverview": True, "hasAppMenu": True}, "login": {"hasOverview": False, "hasAppMenu": False}},
            default_name="user",
        )
        window = ShellWindow(resolve("login", registry, "user"))
        try:
            assert window.overview_button is None
            assert window.app_menu_label is None
            assert window.show_run_dialog() is None
        finally:
            window.destroy()
