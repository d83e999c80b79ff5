# File: utils/__init__.py
"""Pure Python utilities for Thunderpick Move.

This module contains pure Python functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

DIRECTIVE - UTILS PURITY: NO `homeassistant.*` imports allowed in this module.

Submodules:
    - dt_utils: Local calendar days, day keys, day-of-year, timestamp parsing
    - math_utils: Saturating arithmetic, bucket lookup, capped ratios

Usage:
    from . import dt_utils
    from .math_utils import saturating_add
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
