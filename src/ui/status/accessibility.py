"""Accessibility status indicator."""

from typing import Any

from src.ui.base.base_indicator import MenuIndicator
from src.utils.constants import INDICATOR_A11Y


class ATIndicator(MenuIndicator):
    """Menu of assistive technology toggles (screen reader, high contrast, large text)."""

    FEATURES = ("Screen Reader", "High Contrast", "Large Text")

    def __init__(self, master: Any, **kwargs):
        self.enabled_features = set()
        super().__init__(master, INDICATOR_A11Y, **kwargs)

    def icon_text(self) -> str:
        return "A11y*" if self.enabled_features else "A11y"

    def toggle(self, feature: str) -> bool:
        """Toggle an assistive feature.

        Args:
            feature: One of FEATURES

        Returns:
            True if the feature is now enabled

        Raises:
            ValueError: If feature is not a known feature
        """
        if feature not in self.FEATURES:
            raise ValueError(f"Unknown accessibility feature: {feature}")
        if feature in self.enabled_features:
            self.enabled_features.discard(feature)
        else:
            self.enabled_features.add(feature)
        self.refresh()
        return feature in self.enabled_features
