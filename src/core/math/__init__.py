"""
Core math modules для Placement

Математические примитивы с гарантией стабильности.
"""

from src.core.math.numerical_safeguards import (
    is_nan,
    is_valid_float,
    safe_divide,
)

__all__ = [
    "is_nan",
    "is_valid_float",
    "safe_divide",
]
