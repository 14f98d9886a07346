"""
Main entry point for the Shell Session Modes launcher.

This module resolves the session mode requested by the hosting process,
prepares the shell panel for it and activates the mode's session.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from src.services.exceptions import ServiceError
from src.services.mode_registry import get_registry
from src.services.mode_resolver import ActiveMode, get_active_mode
from src.utils.config import get_config

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shell-modes",
        description="Launch the shell panel in a session mode",
    )
    parser.add_argument(
        "--mode",
        help="Session mode to run (default: SHELL_SESSION_MODE or 'user')",
    )
    parser.add_argument(
        "--list-modes",
        action="store_true",
        help="List the registered session modes and exit",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print the resolved mode configuration and exit without starting the UI",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser


def describe_mode(active_mode: ActiveMode) -> List[str]:
    """
    Format the resolved mode for display.

    Args:
        active_mode: Resolved mode

    Returns:
        Lines of "field: value"
    """
    lines = []
    for name, value in active_mode.as_dict().items():
        if name == "status_area":
            value = ", ".join(value.order) if value is not None else None
        elif name == "session_type" and value is not None:
            value = value.value
        lines.append(f"{name}: {value}")
    return lines


def apply_stylesheet(active_mode: ActiveMode) -> None:
    """Load the mode's stylesheet override as the customtkinter color theme."""
    import customtkinter as ctk

    stylesheet = active_mode.extra_stylesheet
    if stylesheet is None:
        ctk.set_default_color_theme("blue")
        return

    if not Path(stylesheet).is_file():
        logger.warning(f"Stylesheet '{stylesheet}' not found, using default theme")
        ctk.set_default_color_theme("blue")
        return

    ctk.set_default_color_theme(stylesheet)


def run_shell(active_mode: ActiveMode) -> None:
    """Prepare the shell panel, start the session and run the event loop."""
    import customtkinter as ctk

    from src.ui.main_window import ShellWindow

    ctk.set_appearance_mode(get_config().ui_appearance)
    apply_stylesheet(active_mode)

    window = ShellWindow(active_mode)
    active_mode.activate()
    window.mainloop()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main application entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = get_config(args.mode)

    try:
        registry = get_registry()

        if args.list_modes:
            for name in registry.mode_names():
                marker = " (default)" if name == registry.default_name else ""
                print(f"{name}{marker}")
            return 0

        if not registry.has_mode(config.session_mode):
            logger.error(
                f"Unknown session mode '{config.session_mode}'. "
                f"Available: {', '.join(registry.mode_names())}"
            )
            return 1

        active_mode = get_active_mode()

        if args.check:
            print("\n".join(describe_mode(active_mode)))
            return 0

        run_shell(active_mode)

    except ServiceError as e:
        logger.error(f"Failed to start session mode '{config.session_mode}': {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
