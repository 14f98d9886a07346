"""Service layer exception classes for Shell Session Modes.

Exception Hierarchy:
    ServiceError (base)
    ├── UnknownModeError
    ├── InvalidModeConfigError
    └── InvalidStatusAreaError
"""

from typing import Iterable, List


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class UnknownModeError(ServiceError):
    """Raised when a mode name is not registered.

    Callers are expected to check ``has_mode`` first, so this signals a
    programming error rather than a recoverable condition.

    Args:
        mode_name: The name that was looked up
        available: Registered mode names

    Example:
        >>> raise UnknownModeError("kiosk", ["login", "user"])
        UnknownModeError: Unknown session mode 'kiosk'. Available: login, user
    """

    def __init__(self, mode_name: str, available: Iterable[str] = ()):
        self.mode_name = mode_name
        self.available: List[str] = list(available)
        super().__init__(
            f"Unknown session mode '{mode_name}'. Available: {', '.join(self.available)}"
        )


class InvalidModeConfigError(ServiceError):
    """Raised when a mode record or registry is malformed."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        error_msg = "; ".join(errors)
        super().__init__(f"Invalid mode configuration: {error_msg}")


class InvalidStatusAreaError(ServiceError):
    """Raised when a status-area order names an indicator with no implementation."""

    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            f"Status area order references indicators without an implementation: "
            f"{', '.join(missing)}"
        )
