"""
Contract Validation Module

Модуль для валидации JSON payload'ов Vector / Line / Square / Layout.
"""

from .validators import (
    ContractValidator,
    LayoutValidator,
    LineValidator,
    SchemaLoader,
    SquareValidator,
    VectorValidator,
    validate_layout,
    validate_line,
    validate_square,
    validate_vector,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "VectorValidator",
    "LineValidator",
    "SquareValidator",
    "LayoutValidator",
    # Functions
    "validate_vector",
    "validate_line",
    "validate_square",
    "validate_layout",
]
