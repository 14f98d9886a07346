"""
Constants for the Shell Session Modes application.

This module defines all system-wide constants including:
- Application metadata
- Session mode names
- Status-area indicator names
- Environment variable names
"""

from typing import List

# ============================================================================
# Application Metadata
# ============================================================================

APP_NAME = "Shell Session Modes"
APP_VERSION = "0.1.0"

# ============================================================================
# Session Modes
# ============================================================================

MODE_LOGIN = "login"
MODE_USER = "user"

# Mode whose record fills in fields the requested mode leaves unset
DEFAULT_MODE = MODE_USER

# ============================================================================
# Status-Area Indicators
# ============================================================================

INDICATOR_A11Y = "a11y"
INDICATOR_KEYBOARD = "keyboard"
INDICATOR_VOLUME = "volume"
INDICATOR_BLUETOOTH = "bluetooth"
INDICATOR_NETWORK = "network"
INDICATOR_BATTERY = "battery"
INDICATOR_USER_MENU = "userMenu"
INDICATOR_POWER_MENU = "powerMenu"

# Left-to-right placement in the status area
USER_STATUS_AREA_ORDER: List[str] = [
    INDICATOR_A11Y,
    INDICATOR_KEYBOARD,
    INDICATOR_VOLUME,
    INDICATOR_BLUETOOTH,
    INDICATOR_NETWORK,
    INDICATOR_BATTERY,
    INDICATOR_USER_MENU,
]

LOGIN_STATUS_AREA_ORDER: List[str] = [
    INDICATOR_A11Y,
    INDICATOR_KEYBOARD,
    INDICATOR_VOLUME,
    INDICATOR_BATTERY,
    INDICATOR_POWER_MENU,
]

# Default import path of the network indicator provider (module:attribute)
DEFAULT_NETWORK_PROVIDER = "src.ui.status.network:NetworkIndicator"

# Stylesheet (customtkinter theme) applied in login mode, relative to datadir
LOGIN_STYLESHEET = "theme/login.json"

# ============================================================================
# Environment Variables
# ============================================================================

ENV_SESSION_MODE = "SHELL_SESSION_MODE"
ENV_HAVE_BLUETOOTH = "SHELL_HAVE_BLUETOOTH"
ENV_DATADIR = "SHELL_DATADIR"
ENV_NETWORK_PROVIDER = "SHELL_NETWORK_PROVIDER"
ENV_UI_APPEARANCE = "SHELL_UI_APPEARANCE"

UI_APPEARANCE_MODES: List[str] = ["system", "light", "dark"]
