"""
Fallback-color component - ``color`` fallback chains for older engines.
"""

from .component import FALLBACK_PROPERTY, fallback_color, run
from .models import FallbackColorInput, FallbackColorOutput

__all__ = [
    "run",
    "fallback_color",
    "FallbackColorInput",
    "FallbackColorOutput",
    "FALLBACK_PROPERTY",
]
