"""
Configuration management for the Shell Session Modes application.

This module handles:
- The session mode requested by the hosting process
- Build/platform capability flags (bluetooth support)
- The data directory holding theme files
- The network indicator provider import path
- UI appearance
"""

import logging
import os
from pathlib import Path
from typing import Optional

from .constants import (
    APP_NAME,
    APP_VERSION,
    DEFAULT_MODE,
    DEFAULT_NETWORK_PROVIDER,
    ENV_DATADIR,
    ENV_HAVE_BLUETOOTH,
    ENV_NETWORK_PROVIDER,
    ENV_SESSION_MODE,
    ENV_UI_APPEARANCE,
    UI_APPEARANCE_MODES,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class Config:
    """
    Application configuration manager.

    Values are read from the environment once, at construction. Invalid
    values fall back to their defaults with a logged warning.
    """

    def __init__(self, session_mode: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            session_mode: Explicit mode name. If None, uses SHELL_SESSION_MODE
                or the default mode.
        """
        self._app_name = APP_NAME
        self._app_version = APP_VERSION

        if session_mode is None:
            session_mode = os.environ.get(ENV_SESSION_MODE, DEFAULT_MODE)
        self._session_mode = session_mode

        self._have_bluetooth = self._read_flag(ENV_HAVE_BLUETOOTH, default=True)

        datadir = os.environ.get(ENV_DATADIR)
        self._datadir = Path(datadir) if datadir else self._get_package_data_dir()

        self._network_provider = os.environ.get(ENV_NETWORK_PROVIDER, DEFAULT_NETWORK_PROVIDER)

        appearance = os.environ.get(ENV_UI_APPEARANCE, "system").lower()
        if appearance not in UI_APPEARANCE_MODES:
            logger.warning(
                f"Invalid {ENV_UI_APPEARANCE}='{appearance}', "
                f"must be one of {UI_APPEARANCE_MODES}. Using 'system'."
            )
            appearance = "system"
        self._ui_appearance = appearance

    @staticmethod
    def _read_flag(name: str, default: bool) -> bool:
        """Read a boolean environment flag, warning on unrecognized values."""
        raw = os.environ.get(name)
        if raw is None:
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid {name}='{raw}', expected a boolean. Using {default}.")
        return default

    def _get_package_data_dir(self) -> Path:
        """
        Get the data directory shipped with the package.

        Returns:
            Path to the package's data/ directory
        """
        return Path(__file__).parent.parent / "data"

    @property
    def app_name(self) -> str:
        """Application name."""
        return self._app_name

    @property
    def app_version(self) -> str:
        """Application version."""
        return self._app_version

    @property
    def session_mode(self) -> str:
        """Name of the session mode requested for this process."""
        return self._session_mode

    @property
    def have_bluetooth(self) -> bool:
        """Whether this build includes bluetooth support."""
        return self._have_bluetooth

    @property
    def datadir(self) -> Path:
        """Base directory for theme files."""
        return self._datadir

    @property
    def network_provider(self) -> str:
        """Import path (module:attribute) of the network indicator provider."""
        return self._network_provider

    @property
    def ui_appearance(self) -> str:
        """customtkinter appearance mode: system, light or dark."""
        return self._ui_appearance

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(session_mode='{self._session_mode}', " f"datadir='{self._datadir}')"


# Global configuration instance
_config_instance: Optional[Config] = None


def get_config(session_mode: Optional[str] = None) -> Config:
    """
    Get the global configuration instance.

    Once created, the singleton's session mode cannot be changed by passing
    a different argument; the mode is fixed for the process lifetime.

    Args:
        session_mode: Optional mode name for initial creation. Ignored if the
            singleton already exists.

    Returns:
        Config instance
    """
    global _config_instance

    if _config_instance is None:
        _config_instance = Config(session_mode)
    elif session_mode is not None and session_mode != _config_instance.session_mode:
        logger.warning(
            f"get_config() called with session_mode='{session_mode}' but singleton "
            f"already exists with session_mode='{_config_instance.session_mode}'. "
            f"Returning existing singleton."
        )

    return _config_instance


def reset_config():
    """
    Reset the global configuration instance.

    Useful for testing.
    """
    global _config_instance
    _config_instance = None
