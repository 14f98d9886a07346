"""Capability probes for optional status-area indicator providers.

A provider is referenced by an import path of the form ``module:attribute``.
Probing imports the module, looks up the attribute and, when the module
defines an ``is_supported()`` function, asks it whether the host can run the
provider. Any failure is logged as a warning and reported as absence; it
never propagates to registry construction.
"""

import importlib
import logging
from typing import Optional, Tuple

from src.services.logging_utils import get_service_logger, log_operation

logger = get_service_logger(__name__)


def split_provider_path(provider_path: str) -> Tuple[str, str]:
    """
    Split a ``module:attribute`` import path.

    Args:
        provider_path: Import path, e.g. "src.ui.status.network:NetworkIndicator"

    Returns:
        Tuple of (module_name, attribute_name)

    Raises:
        ValueError: If the path does not have exactly one ':' separating two
            non-empty parts
    """
    module_name, sep, attribute = provider_path.partition(":")
    if not sep or not module_name or not attribute or ":" in attribute:
        raise ValueError(f"Invalid provider path '{provider_path}', expected 'module:attribute'")
    return module_name, attribute


def probe_indicator(indicator: str, provider_path: str) -> Optional[type]:
    """
    Load an optional indicator provider if the host supports it.

    Args:
        indicator: Indicator name, used for logging
        provider_path: ``module:attribute`` import path of the provider

    Returns:
        The provider class, or None if it is unavailable
    """
    try:
        module_name, attribute = split_provider_path(provider_path)
        module = importlib.import_module(module_name)
        provider = getattr(module, attribute)
    except Exception as e:
        log_operation(
            logger,
            operation="probe_indicator",
            outcome="unavailable",
            level=logging.WARNING,
            indicator=indicator,
            provider=provider_path,
            error=str(e),
        )
        return None

    is_supported = getattr(module, "is_supported", None)
    try:
        supported = is_supported() if is_supported is not None else True
    except Exception as e:
        log_operation(
            logger,
            operation="probe_indicator",
            outcome="probe_failed",
            level=logging.WARNING,
            indicator=indicator,
            provider=provider_path,
            error=str(e),
        )
        return None

    if not supported:
        log_operation(
            logger,
            operation="probe_indicator",
            outcome="unsupported",
            level=logging.WARNING,
            indicator=indicator,
            provider=provider_path,
        )
        return None

    log_operation(
        logger,
        operation="probe_indicator",
        outcome="available",
        level=logging.DEBUG,
        indicator=indicator,
        provider=provider_path,
    )
    return provider


def indicator_available(indicator: str, provider_path: str) -> bool:
    """Presence flag for an optional indicator provider."""
    return probe_indicator(indicator, provider_path) is not None
