"""Session-start callbacks for the shell's session modes.

Each mode names one of these as its ``create_session`` callback. The callback
is invoked once, by ``ActiveMode.activate()``, after the mode's UI chrome has
been prepared.
"""

import logging
from enum import Enum

from src.services.logging_utils import get_service_logger, log_operation
from src.ui.session_state import get_session_state

logger = get_service_logger(__name__)


class SessionType(str, Enum):
    """Kind of session a mode brings up."""

    LOGIN = "login"
    USER = "user"


def create_login_session() -> None:
    """Bring up the login-screen session."""
    get_session_state().record_session_started("login", SessionType.LOGIN)
    log_operation(
        logger,
        operation="create_login_session",
        outcome="started",
        session_type=SessionType.LOGIN.value,
    )


def create_user_session() -> None:
    """Bring up the logged-in user session."""
    state = get_session_state()
    if state.has_started():
        log_operation(
            logger,
            operation="create_user_session",
            outcome="replacing_session",
            level=logging.DEBUG,
            previous=str(state.get_session_type().value),
        )
    state.record_session_started("user", SessionType.USER)
    log_operation(
        logger,
        operation="create_user_session",
        outcome="started",
        session_type=SessionType.USER.value,
    )
