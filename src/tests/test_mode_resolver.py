"""Tests for mode resolution and activation."""

from dataclasses import fields
from unittest.mock import MagicMock

import pytest

from src.services.exceptions import UnknownModeError
from src.services.mode_registry import ModeConfig, ModeRegistry
from src.services.mode_resolver import (
    ActiveMode,
    get_active_mode,
    merge_configs,
    resolve,
)
from src.services.session_service import SessionType
from src.ui.session_state import get_session_state
from src.ui.status import network


class A:
    pass


class B:
    pass


class TestResolve:
    def test_requested_fields_override_default(self, synthetic_registry):
        active = resolve("login", synthetic_registry, "default")
        assert active.name == "login"
        assert active.has_overview is False
        assert active.extra_stylesheet == "/usr/share/shell/login.json"

    def test_unset_fields_fall_back_to_default(self, synthetic_registry):
        active = resolve("login", synthetic_registry, "default")
        assert active.has_app_menu is True
        assert active.has_run_dialog is True
        assert active.session_type is SessionType.USER
        assert active.status_area.order == ("a", "b", "c")

    def test_every_field_is_explicit_or_default(self, synthetic_registry):
        default = synthetic_registry.get("default")
        for name in synthetic_registry.mode_names():
            requested = synthetic_registry.get(name)
            active = resolve(name, synthetic_registry, "default")
            for field_name in ModeConfig.field_names():
                if field_name == "create_session":
                    continue
                value = getattr(active, field_name)
                if requested.is_set(field_name):
                    assert value == getattr(requested, field_name)
                elif default.is_set(field_name):
                    assert value == getattr(default, field_name)
                else:
                    assert value is None

    def test_self_merge_matches_raw_default(self, synthetic_registry):
        default = synthetic_registry.get("default")
        active = resolve("default", synthetic_registry, "default")
        for field_name, value in default.explicit_fields().items():
            assert getattr(active, field_name) == value

    def test_fields_unset_everywhere_are_none(self, synthetic_registry):
        active = resolve("login", synthetic_registry, "default")
        assert active.allow_settings is None
        assert active.has_workspaces is None

    def test_status_area_is_replaced_not_merged(self, synthetic_registry):
        active = resolve("kiosk", synthetic_registry, "default")
        assert active.status_area.order == ("x", "y")
        assert set(active.status_area.implementation) == {"x", "y"}

    def test_end_to_end_example(self):
        registry = ModeRegistry.from_dict(
            {
                "default": {
                    "hasOverview": True,
                    "statusArea": {"order": ["a", "b"], "implementation": {"a": A, "b": B}},
                },
                "login": {"hasOverview": False},
            },
            default_name="default",
        )
        active = resolve("login", registry, "default")
        assert active.has_overview is False
        assert active.status_area.order == ("a", "b")

    def test_unknown_mode_fails_fast(self, synthetic_registry):
        with pytest.raises(UnknownModeError) as exc_info:
            resolve("Login", synthetic_registry, "default")
        assert exc_info.value.mode_name == "Login"

    def test_unknown_default_fails_fast(self, synthetic_registry):
        with pytest.raises(UnknownModeError):
            resolve("login", synthetic_registry, "user")

    def test_active_mode_is_independent_copy(self, synthetic_registry):
        active = resolve("default", synthetic_registry, "default")
        raw = synthetic_registry.get("default").status_area
        assert active.status_area == raw
        assert active.status_area is not raw

    def test_active_mode_is_immutable(self, synthetic_registry):
        active = resolve("login", synthetic_registry, "default")
        with pytest.raises(AttributeError):
            active.has_overview = True

    def test_callback_is_not_a_public_field(self):
        callback = MagicMock()
        registry = ModeRegistry({"user": ModeConfig(create_session=callback)}, default_name="user")
        active = resolve("user", registry, "user")
        assert "create_session" not in [f.name for f in fields(active)]
        assert "create_session" not in active.as_dict()

    def test_as_dict_lists_public_fields(self, synthetic_registry):
        data = resolve("login", synthetic_registry, "default").as_dict()
        assert data["name"] == "login"
        assert data["has_overview"] is False
        assert set(data) == {"name"} | (set(ModeConfig.field_names()) - {"create_session"})


class TestMergeConfigs:
    def test_shallow_merge(self):
        merged = merge_configs(
            ModeConfig(has_overview=False),
            ModeConfig(has_overview=True, has_app_menu=True),
        )
        assert merged["has_overview"] is False
        assert merged["has_app_menu"] is True
        assert merged["create_session"] is None


class TestActivate:
    def test_activate_invokes_callback_once_per_call(self):
        callback = MagicMock()
        registry = ModeRegistry({"user": ModeConfig(create_session=callback)}, default_name="user")
        active = resolve("user", registry, "user")

        active.activate()
        callback.assert_called_once_with()

        active.activate()
        assert callback.call_count == 2

    def test_activate_uses_default_callback(self):
        callback = MagicMock()
        registry = ModeRegistry(
            {"user": ModeConfig(create_session=callback), "login": ModeConfig(has_overview=False)},
            default_name="user",
        )
        resolve("login", registry, "user").activate()
        callback.assert_called_once_with()

    def test_activate_without_callback_is_noop(self, synthetic_registry):
        active = resolve("kiosk", synthetic_registry, "default")
        assert active.activate() is None

    def test_explicit_none_callback_overrides_default(self):
        callback = MagicMock()
        registry = ModeRegistry(
            {"user": ModeConfig(create_session=callback), "preview": ModeConfig(create_session=None)},
            default_name="user",
        )
        resolve("preview", registry, "user").activate()
        callback.assert_not_called()

    def test_direct_construction_without_callback(self):
        assert ActiveMode(name="bare").activate() is None


class TestGetActiveMode:
    def test_resolves_configured_mode(self, monkeypatch):
        monkeypatch.setattr(network, "is_supported", lambda: False)
        monkeypatch.setenv("SHELL_SESSION_MODE", "login")
        active = get_active_mode()
        assert active.name == "login"
        assert active.session_type is SessionType.LOGIN
        assert active.has_app_menu is False
        assert get_active_mode() is active

    def test_activating_user_mode_starts_user_session(self, monkeypatch):
        monkeypatch.setattr(network, "is_supported", lambda: False)
        get_active_mode().activate()
        assert get_session_state().get_session_type() is SessionType.USER

    def test_unknown_configured_mode_raises(self, monkeypatch):
        monkeypatch.setenv("SHELL_SESSION_MODE", "gdm")
        with pytest.raises(UnknownModeError):
            get_active_mode()
