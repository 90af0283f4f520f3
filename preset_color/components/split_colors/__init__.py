"""
Split-colors component - Flat color tokens to nested theme colors.
"""

from .component import SEPARATOR, run, split_colors
from .models import SplitColorsInput, SplitColorsOutput

__all__ = [
    # Entry points
    "run",
    "split_colors",
    # Models
    "SplitColorsInput",
    "SplitColorsOutput",
    # Constants
    "SEPARATOR",
]
