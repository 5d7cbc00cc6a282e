"""
Common — Comparator Utilities

Обобщённые предикаты сравнения по одному полю и выбор экстремального
элемента последовательности.

Поле читается через getattr (атрибуты модели, read-only свойства вроде
Line.length) либо по ключу для mapping-объектов.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. le_by = lt_by OR eq_by, ge_by = gt_by OR eq_by (NaN → False везде)
2. compare_and_select_by: пустой вход → None, при равенстве побеждает первый
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable, Optional, Sequence, TypeVar

T = TypeVar("T")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Некорректный аргумент конструктора или операнда.

    Выбрасывается, если значение не является ни числом, ни Vector-подобным
    объектом (x/y), а также при нарушении payload-контракта.
    """

    pass


# =============================================================================
# FIELD ACCESS
# =============================================================================


def field_of(item: Any, selector: str) -> Any:
    """Значение поля selector: ключ для Mapping, иначе атрибут."""
    if isinstance(item, Mapping):
        return item[selector]
    return getattr(item, selector)


def is_number(value: Any) -> bool:
    """True для int/float (numbers.Real), но не для bool."""
    return isinstance(value, Real) and not isinstance(value, bool)


# =============================================================================
# COMPARISON
# =============================================================================


def eq_by(a: Any, b: Any, selector: str) -> bool:
    """
    True, если объекты равны по полю selector.

    Args:
        a: Объект
        b: Объект
        selector: Имя поля

    Returns:
        a.selector == b.selector
    """
    return field_of(a, selector) == field_of(b, selector)


def lt_by(a: Any, b: Any, selector: str) -> bool:
    """True, если a меньше b по полю selector."""
    return field_of(a, selector) < field_of(b, selector)


def gt_by(a: Any, b: Any, selector: str) -> bool:
    """True, если a больше b по полю selector."""
    return field_of(a, selector) > field_of(b, selector)


def le_by(a: Any, b: Any, selector: str) -> bool:
    """
    True, если a меньше или равен b по полю selector.

    Определено как lt_by OR eq_by (а не NOT gt_by), поэтому для NaN
    результат False.
    """
    return lt_by(a, b, selector) or eq_by(a, b, selector)


def ge_by(a: Any, b: Any, selector: str) -> bool:
    """True, если a больше или равен b по полю selector (gt_by OR eq_by)."""
    return gt_by(a, b, selector) or eq_by(a, b, selector)


# =============================================================================
# SELECTION
# =============================================================================


def compare_and_select_by(
    items: Sequence[T], compare: Callable[[T, T], bool]
) -> Optional[T]:
    """
    Выбор элемента последовательности по строгому предикату.

    Первый элемент — текущий победитель; он заменяется кандидатом, если
    compare(candidate, winner) истинно. Для строгих compare (< или >)
    при равенстве остаётся первый встреченный элемент.

    Args:
        items: Упорядоченная последовательность
        compare: Предикат (candidate, winner) -> bool

    Returns:
        Выбранный элемент или None для пустой последовательности

    Examples:
        >>> compare_and_select_by([3, 1, 2], lambda a, b: a < b)
        1
        >>> compare_and_select_by([], lambda a, b: a < b) is None
        True
    """
    if not items:
        return None

    winner = items[0]

    for item in items:
        if compare(item, winner):
            winner = item

    return winner
