"""Mode Resolver - the session mode in effect for this process.

Resolution merges the requested mode's record with the default mode's
record field by field: a field the requested mode leaves unset takes the
default's value. The merge is shallow. A requested ``status_area`` replaces
the default's status area as a whole; orders and implementation maps are
never combined.

The merged ``create_session`` callback is kept out of the public fields and
invoked by ``ActiveMode.activate()``.
"""

from dataclasses import InitVar, dataclass, fields
from typing import Any, Callable, Dict, Optional

from src.services.exceptions import UnknownModeError
from src.services.logging_utils import get_service_logger, log_operation
from src.services.mode_registry import UNSET, ModeConfig, ModeRegistry, StatusAreaConfig
from src.services.session_service import SessionType

logger = get_service_logger(__name__)


@dataclass(frozen=True)
class ActiveMode:
    """Merged configuration of the active session mode.

    Fields unset on both the requested and the default record are None.
    """

    name: str
    has_overview: Optional[bool] = None
    has_app_menu: Optional[bool] = None
    show_calendar_events: Optional[bool] = None
    allow_settings: Optional[bool] = None
    allow_extensions: Optional[bool] = None
    allow_keybindings_when_modal: Optional[bool] = None
    has_run_dialog: Optional[bool] = None
    has_workspaces: Optional[bool] = None
    extra_stylesheet: Optional[str] = None
    session_type: Optional[SessionType] = None
    status_area: Optional[StatusAreaConfig] = None
    create_session: InitVar[Optional[Callable[[], None]]] = None

    def __post_init__(self, create_session):
        object.__setattr__(self, "_create_session", create_session)

    def activate(self) -> None:
        """Start this mode's session, if it defines a session-start callback."""
        log_operation(
            logger,
            operation="activate_mode",
            outcome="starting" if self._create_session else "no_session_callback",
            mode_name=self.name,
        )
        if self._create_session:
            self._create_session()

    def as_dict(self) -> Dict[str, Any]:
        """Public fields as a dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def merge_configs(requested: ModeConfig, default: ModeConfig) -> Dict[str, Any]:
    """
    Merge two mode records field by field.

    Args:
        requested: Record of the mode being resolved
        default: Record supplying unset fields

    Returns:
        Dict of field name -> value; fields unset on both records map to None
    """
    merged = {}
    for name in ModeConfig.field_names():
        value = getattr(requested, name)
        if value is UNSET:
            value = getattr(default, name)
        merged[name] = None if value is UNSET else value
    return merged


def resolve(requested_name: str, registry: ModeRegistry, default_name: str) -> ActiveMode:
    """
    Resolve a mode against a registry.

    Args:
        requested_name: Mode to resolve; must be registered
        registry: Registry to look modes up in
        default_name: Mode whose record fills unset fields

    Returns:
        ActiveMode holding an independent copy of the merged fields

    Raises:
        UnknownModeError: If either name is not registered
    """
    if not registry.has_mode(requested_name):
        raise UnknownModeError(requested_name, registry.mode_names())

    merged = merge_configs(registry.get(requested_name), registry.get(default_name))
    if merged["status_area"] is not None:
        merged["status_area"] = merged["status_area"].copy()

    create_session = merged.pop("create_session")
    active = ActiveMode(name=requested_name, create_session=create_session, **merged)

    log_operation(
        logger,
        operation="resolve_mode",
        outcome="success",
        mode_name=requested_name,
        default_mode=default_name,
        explicit_fields=sorted(registry.get(requested_name).explicit_fields()),
    )
    return active


# Active mode for this process, resolved on first use
_active_mode: Optional[ActiveMode] = None


def get_active_mode() -> ActiveMode:
    """
    Get the active mode for this process, resolving it on first call.

    The mode name comes from the global configuration and is resolved
    against the process-wide registry.

    Returns:
        ActiveMode instance

    Raises:
        UnknownModeError: If the configured mode is not registered
    """
    global _active_mode

    if _active_mode is None:
        from src.services.mode_registry import get_registry
        from src.utils.config import get_config

        registry = get_registry()
        _active_mode = resolve(get_config().session_mode, registry, registry.default_name)
    return _active_mode


def reset_active_mode():
    """
    Reset the process-wide active mode.

    Useful for testing.
    """
    global _active_mode
    _active_mode = None
