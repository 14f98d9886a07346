"""
Session state for the running shell process.

This module provides a singleton SessionState class that records which
session mode was activated and which session type it brought up. The state
is in-memory only and lives for the process lifetime.

Usage:
    from src.ui.session_state import get_session_state

    session = get_session_state()
    session.record_session_started("user", SessionType.USER)
"""

from typing import List, Optional, Tuple


class SessionState:
    """
    Singleton class recording session activation for the current process.

    The singleton pattern ensures the session callbacks and the launcher
    share the same state instance.
    """

    _instance: Optional["SessionState"] = None

    def __new__(cls) -> "SessionState":
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        """Initialize instance attributes. Called once on first creation."""
        self.session_type = None
        self.started: List[Tuple[str, object]] = []

    def record_session_started(self, session_kind: str, session_type) -> None:
        """
        Record that a session was brought up.

        Args:
            session_kind: Which session callback ran ("login" or "user").
            session_type: The SessionType of the started session.
        """
        self.session_type = session_type
        self.started.append((session_kind, session_type))

    def get_session_type(self):
        """
        Get the type of the most recently started session.

        Returns:
            The SessionType if a session was started, None otherwise.
        """
        return self.session_type

    def has_started(self) -> bool:
        """Check whether any session has been started."""
        return bool(self.started)

    def reset(self) -> None:
        """
        Reset all session state to initial values.

        Primarily used for test isolation.
        """
        self.session_type = None
        self.started = []


def get_session_state() -> SessionState:
    """
    Get the singleton SessionState instance.

    Returns:
        The singleton SessionState instance.
    """
    return SessionState()
