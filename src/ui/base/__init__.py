"""Base classes for status-area indicators.

- BaseIndicator: Abstract base class for icon indicators
- MenuIndicator: Indicator rendered as a button opening a menu
"""

from .base_indicator import BaseIndicator, MenuIndicator

__all__ = ["BaseIndicator", "MenuIndicator"]
