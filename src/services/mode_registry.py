"""Mode Registry - catalogue of the shell's session modes.

A session mode is a named preset of UI capability flags and status-area
contents: the login screen disables the overview, app menu and run dialog
and shows a power menu, while the user session enables them and shows a
user menu.

Records are ``ModeConfig`` instances whose fields default to ``UNSET``. An
unset field is filled from the default mode's record at resolution time
(see ``src.services.mode_resolver``); an explicit ``None`` or ``False`` is a
real value and is kept.

Usage:
    from src.services.mode_registry import get_registry

    registry = get_registry()
    if registry.has_mode("login"):
        ...
"""

from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from src.services.capability_service import probe_indicator
from src.services.exceptions import (
    InvalidModeConfigError,
    InvalidStatusAreaError,
    UnknownModeError,
)
from src.services.logging_utils import get_service_logger, log_operation
from src.services.session_service import (
    SessionType,
    create_login_session,
    create_user_session,
)
from src.utils.constants import (
    DEFAULT_MODE,
    INDICATOR_A11Y,
    INDICATOR_BATTERY,
    INDICATOR_BLUETOOTH,
    INDICATOR_KEYBOARD,
    INDICATOR_NETWORK,
    INDICATOR_POWER_MENU,
    INDICATOR_USER_MENU,
    INDICATOR_VOLUME,
    LOGIN_STATUS_AREA_ORDER,
    LOGIN_STYLESHEET,
    MODE_LOGIN,
    MODE_USER,
    USER_STATUS_AREA_ORDER,
)

logger = get_service_logger(__name__)


class _Unset:
    """Marker type for a mode field that was not set."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class StatusAreaConfig:
    """Indicators shown in the status area.

    Attributes:
        order: Indicator names, left to right
        implementation: Indicator name -> indicator widget class. May hold
            entries not named in ``order``.

    Raises:
        InvalidStatusAreaError: If a name in ``order`` has no implementation
    """

    order: Tuple[str, ...] = ()
    implementation: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "order", tuple(self.order))
        object.__setattr__(self, "implementation", MappingProxyType(dict(self.implementation)))
        missing = [name for name in self.order if name not in self.implementation]
        if missing:
            raise InvalidStatusAreaError(missing)

    @classmethod
    def from_available(
        cls, preferred_order: Iterable[str], implementation: Mapping[str, Any]
    ) -> "StatusAreaConfig":
        """Build a status area, dropping ordered names with no implementation.

        Args:
            preferred_order: Desired left-to-right order
            implementation: Indicators available on this host

        Returns:
            StatusAreaConfig whose order is the available subset
        """
        order = []
        for name in preferred_order:
            if name in implementation:
                order.append(name)
            else:
                logger.debug(f"Status area indicator '{name}' not available, skipping")
        return cls(order=tuple(order), implementation=implementation)

    def copy(self) -> "StatusAreaConfig":
        """Independent copy of this status area."""
        return StatusAreaConfig(order=self.order, implementation=dict(self.implementation))


# camelCase names accepted by ModeConfig.from_dict
_CAMEL_CASE_FIELDS = {
    "hasOverview": "has_overview",
    "hasAppMenu": "has_app_menu",
    "showCalendarEvents": "show_calendar_events",
    "allowSettings": "allow_settings",
    "allowExtensions": "allow_extensions",
    "allowKeybindingsWhenModal": "allow_keybindings_when_modal",
    "hasRunDialog": "has_run_dialog",
    "hasWorkspaces": "has_workspaces",
    "extraStylesheet": "extra_stylesheet",
    "sessionType": "session_type",
    "statusArea": "status_area",
    "createSession": "create_session",
}


@dataclass(frozen=True)
class ModeConfig:
    """Configuration record of one session mode.

    Every field defaults to ``UNSET``; see ``is_set``.
    """

    has_overview: Union[bool, _Unset] = UNSET
    has_app_menu: Union[bool, _Unset] = UNSET
    show_calendar_events: Union[bool, _Unset] = UNSET
    allow_settings: Union[bool, _Unset] = UNSET
    allow_extensions: Union[bool, _Unset] = UNSET
    allow_keybindings_when_modal: Union[bool, _Unset] = UNSET
    has_run_dialog: Union[bool, _Unset] = UNSET
    has_workspaces: Union[bool, _Unset] = UNSET
    extra_stylesheet: Union[str, None, _Unset] = UNSET
    session_type: Union[SessionType, _Unset] = UNSET
    status_area: Union[StatusAreaConfig, _Unset] = UNSET
    create_session: Union[Callable[[], None], None, _Unset] = UNSET

    def is_set(self, field_name: str) -> bool:
        """Check whether a field was explicitly set on this record."""
        return getattr(self, field_name) is not UNSET

    def explicit_fields(self) -> Dict[str, Any]:
        """Fields explicitly set on this record."""
        return {f.name: getattr(self, f.name) for f in fields(self) if self.is_set(f.name)}

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ModeConfig":
        """
        Build a record from a plain mapping.

        Keys may be snake_case field names or their camelCase equivalents.
        ``status_area`` may be a StatusAreaConfig or a mapping with ``order``
        and ``implementation`` keys. Absent keys stay UNSET.

        Args:
            data: Mode fields

        Returns:
            ModeConfig instance

        Raises:
            InvalidModeConfigError: If a key is not a mode field
            InvalidStatusAreaError: If the status area order is inconsistent
        """
        valid = set(cls.field_names())
        values: Dict[str, Any] = {}
        errors = []
        for key, value in data.items():
            name = _CAMEL_CASE_FIELDS.get(key, key)
            if name not in valid:
                errors.append(f"Unrecognized mode field '{key}'")
                continue
            values[name] = value
        if errors:
            raise InvalidModeConfigError(errors)

        status_area = values.get("status_area")
        if isinstance(status_area, Mapping):
            values["status_area"] = StatusAreaConfig(
                order=tuple(status_area.get("order", ())),
                implementation=status_area.get("implementation", {}),
            )
        session_type = values.get("session_type")
        if isinstance(session_type, str) and not isinstance(session_type, SessionType):
            try:
                values["session_type"] = SessionType(session_type)
            except ValueError:
                raise InvalidModeConfigError([f"Invalid session type '{session_type}'"]) from None
        return cls(**values)


class ModeRegistry:
    """Immutable mapping of mode name to ModeConfig.

    Attributes:
        default_name: Mode whose record supplies fields other modes leave unset
    """

    def __init__(self, modes: Mapping[str, ModeConfig], default_name: str = DEFAULT_MODE):
        """Initialize ModeRegistry.

        Args:
            modes: Mode name -> record
            default_name: Name of the fallback mode

        Raises:
            InvalidModeConfigError: If default_name is not among the modes or
                a record is not a ModeConfig
        """
        errors = [
            f"Mode '{name}' is {type(config).__name__}, not ModeConfig"
            for name, config in modes.items()
            if not isinstance(config, ModeConfig)
        ]
        if default_name not in modes:
            errors.append(f"Default mode '{default_name}' is not registered")
        if errors:
            raise InvalidModeConfigError(errors)

        self._modes: Mapping[str, ModeConfig] = MappingProxyType(dict(modes))
        self.default_name = default_name

    @classmethod
    def from_dict(
        cls, modes: Mapping[str, Mapping[str, Any]], default_name: str = DEFAULT_MODE
    ) -> "ModeRegistry":
        """Build a registry from plain mappings (see ModeConfig.from_dict)."""
        return cls(
            {name: ModeConfig.from_dict(data) for name, data in modes.items()},
            default_name=default_name,
        )

    def has_mode(self, name: str) -> bool:
        """Check whether a mode is registered. Exact, case-sensitive match."""
        return name in self._modes

    def get(self, name: str) -> ModeConfig:
        """
        Get a mode's raw record.

        Raises:
            UnknownModeError: If the mode is not registered
        """
        try:
            return self._modes[name]
        except (KeyError, TypeError):
            raise UnknownModeError(name, self.mode_names())

    def mode_names(self) -> List[str]:
        """Registered mode names, in registration order."""
        return list(self._modes)

    @property
    def default(self) -> ModeConfig:
        """Record of the default mode."""
        return self._modes[self.default_name]

    def __contains__(self, name: object) -> bool:
        return name in self._modes

    def __len__(self) -> int:
        return len(self._modes)

    def __repr__(self) -> str:
        return f"ModeRegistry(modes={self.mode_names()}, default_name='{self.default_name}')"


def _standard_implementation(config) -> Dict[str, type]:
    """Indicators available to the user session on this host."""
    from src.ui.status import (
        ATIndicator,
        BatteryIndicator,
        BluetoothIndicator,
        UserMenuButton,
        VolumeIndicator,
        XKBIndicator,
    )

    implementation: Dict[str, type] = {
        INDICATOR_A11Y: ATIndicator,
        INDICATOR_VOLUME: VolumeIndicator,
        INDICATOR_BATTERY: BatteryIndicator,
        INDICATOR_KEYBOARD: XKBIndicator,
        INDICATOR_USER_MENU: UserMenuButton,
    }

    if config.have_bluetooth:
        implementation[INDICATOR_BLUETOOTH] = BluetoothIndicator

    network = probe_indicator(INDICATOR_NETWORK, config.network_provider)
    if network is not None:
        implementation[INDICATOR_NETWORK] = network

    return implementation


def build_default_registry(config=None) -> ModeRegistry:
    """
    Build the standard login and user modes.

    Bluetooth is included only when the build declares support. The network
    indicator is included only when its provider can be loaded; otherwise it
    is omitted with a warning.

    Args:
        config: Config to read capability flags and datadir from. If None,
            uses the global configuration.

    Returns:
        ModeRegistry with "login" and "user" modes, defaulting to "user"
    """
    from src.ui.status import (
        ATIndicator,
        BatteryIndicator,
        PowerMenuButton,
        VolumeIndicator,
        XKBIndicator,
    )

    if config is None:
        from src.utils.config import get_config

        config = get_config()

    implementation = _standard_implementation(config)

    modes = {
        MODE_LOGIN: ModeConfig(
            has_overview=False,
            has_app_menu=False,
            show_calendar_events=False,
            allow_settings=False,
            allow_extensions=False,
            allow_keybindings_when_modal=True,
            has_run_dialog=False,
            has_workspaces=False,
            create_session=create_login_session,
            extra_stylesheet=str(config.datadir / LOGIN_STYLESHEET),
            status_area=StatusAreaConfig.from_available(
                LOGIN_STATUS_AREA_ORDER,
                {
                    INDICATOR_A11Y: ATIndicator,
                    INDICATOR_VOLUME: VolumeIndicator,
                    INDICATOR_BATTERY: BatteryIndicator,
                    INDICATOR_KEYBOARD: XKBIndicator,
                    INDICATOR_POWER_MENU: PowerMenuButton,
                },
            ),
            session_type=SessionType.LOGIN,
        ),
        MODE_USER: ModeConfig(
            has_overview=True,
            has_app_menu=True,
            show_calendar_events=True,
            allow_settings=True,
            allow_extensions=True,
            allow_keybindings_when_modal=False,
            has_run_dialog=True,
            has_workspaces=True,
            create_session=create_user_session,
            extra_stylesheet=None,
            status_area=StatusAreaConfig.from_available(USER_STATUS_AREA_ORDER, implementation),
            session_type=SessionType.USER,
        ),
    }

    registry = ModeRegistry(modes, default_name=DEFAULT_MODE)
    log_operation(
        logger,
        operation="build_registry",
        outcome="success",
        modes=registry.mode_names(),
        user_indicators=list(registry.get(MODE_USER).status_area.order),
    )
    return registry


# Process-wide registry, built on first use
_registry_instance: Optional[ModeRegistry] = None


def get_registry() -> ModeRegistry:
    """
    Get the process-wide mode registry, building it on first call.

    Returns:
        ModeRegistry instance
    """
    global _registry_instance

    if _registry_instance is None:
        _registry_instance = build_default_registry()
    return _registry_instance


def reset_registry():
    """
    Reset the process-wide registry.

    Useful for testing.
    """
    global _registry_instance
    _registry_instance = None


def has_mode(name: str) -> bool:
    """Check whether a mode is registered in the process-wide registry."""
    return get_registry().has_mode(name)
