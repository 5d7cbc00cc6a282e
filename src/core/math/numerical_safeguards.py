"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость геометрических операций:
- Безопасное деление с identity-fallback при нулевом делителе
- Проверка валидности float (NaN/Inf)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. Исключения не выбрасываются, результат всегда float
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(value: float) -> bool:
    """Проверка на NaN (Inf считается числом)."""
    return math.isnan(value)


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(numerator: float, denominator: float, fallback: float) -> float:
    """
    Безопасное деление с защитой от деления на ноль.

    Если denominator точно равен 0.0 или является NaN, возвращается fallback.
    Epsilon-защита для малых ненулевых значений не применяется: деление на
    1e-300 остаётся обычным делением.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при нулевом/NaN знаменателе

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(10.0, 2.0, fallback=10.0)
        5.0
        >>> safe_divide(10.0, 0.0, fallback=10.0)
        10.0
        >>> safe_divide(10.0, float('nan'), fallback=10.0)
        10.0
    """
    if denominator == 0 or is_nan(denominator):
        return fallback

    return numerator / denominator
