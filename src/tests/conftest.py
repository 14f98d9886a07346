"""Pytest configuration and fixtures for session mode tests."""

import pytest

from src.services.mode_registry import ModeRegistry, reset_registry
from src.services.mode_resolver import reset_active_mode
from src.ui.session_state import get_session_state
from src.utils.config import reset_config


class DummyIndicator:
    """Stand-in indicator descriptor for synthetic registries."""


class OtherIndicator:
    """Second stand-in indicator descriptor."""


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Reset process-wide config, registry, active mode and session state."""
    for name in (
        "SHELL_SESSION_MODE",
        "SHELL_HAVE_BLUETOOTH",
        "SHELL_DATADIR",
        "SHELL_NETWORK_PROVIDER",
        "SHELL_UI_APPEARANCE",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_registry()
    reset_active_mode()
    get_session_state().reset()
    yield
    reset_config()
    reset_registry()
    reset_active_mode()
    get_session_state().reset()


@pytest.fixture
def synthetic_registry():
    """Provide a small registry: a complete default mode and a sparse login mode."""
    return ModeRegistry.from_dict(
        {
            "default": {
                "hasOverview": True,
                "hasAppMenu": True,
                "hasRunDialog": True,
                "extraStylesheet": None,
                "sessionType": "user",
                "statusArea": {
                    "order": ["a", "b", "c"],
                    "implementation": {"a": DummyIndicator, "b": DummyIndicator, "c": OtherIndicator},
                },
            },
            "login": {
                "hasOverview": False,
                "extraStylesheet": "/usr/share/shell/login.json",
            },
            "kiosk": {
                "hasRunDialog": False,
                "statusArea": {
                    "order": ["x", "y"],
                    "implementation": {"x": OtherIndicator, "y": DummyIndicator},
                },
            },
        },
        default_name="default",
    )
