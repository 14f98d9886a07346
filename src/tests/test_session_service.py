"""Tests for the session-start callbacks."""

import logging

from src.services.session_service import (
    SessionType,
    create_login_session,
    create_user_session,
)
from src.ui.session_state import get_session_state


class TestSessionCallbacks:
    def test_create_login_session_records_login(self):
        create_login_session()
        state = get_session_state()
        assert state.get_session_type() == SessionType.LOGIN
        assert state.started == [("login", SessionType.LOGIN)]

    def test_create_user_session_records_user(self):
        create_user_session()
        assert get_session_state().get_session_type() == SessionType.USER

    def test_user_session_after_login(self, caplog):
        create_login_session()
        with caplog.at_level(logging.DEBUG, logger="shell_modes.services"):
            create_user_session()
        assert "create_user_session: replacing_session" in caplog.text
        assert get_session_state().get_session_type() == SessionType.USER

    def test_session_type_values(self):
        assert SessionType("login") is SessionType.LOGIN
        assert SessionType.USER.value == "user"
