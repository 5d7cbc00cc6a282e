"""
Vector — 2D точка / смещение

Immutable Pydantic модель (x, y) и свободные функции над ней:
- Арифметика (move/add/subtract/multiply/divide) по оси X, Y или обеим
- Сравнения по оси и по обеим осям
- Выбор экстремумов (max/min/avg) и фильтрация по совпадающей координате

Арифметика обобщена по любому "point-like" типу (x/y атрибуты): результат
имеет тот же конкретный тип, что и вход, обновляются только x/y, остальные
поля сохраняются. Входные объекты никогда не изменяются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на нулевой операнд по оси — no-op по этой оси
2. Агрегаты (max_by_*, min_by_*, avg_by_xy) → None для пустого входа
3. Все результаты — новые объекты
"""

import dataclasses
import math
from collections.abc import Mapping
from typing import Any, Final, Iterable, Optional, Protocol, Sequence, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from src.core.math.numerical_safeguards import safe_divide
from src.placement.common import (
    InvalidArgument,
    compare_and_select_by,
    eq_by,
    field_of,
    ge_by,
    gt_by,
    is_number,
    le_by,
    lt_by,
)


# =============================================================================
# VECTOR MODEL
# =============================================================================


class PointLike(Protocol):
    """
    Любой объект с числовыми атрибутами x и y.

    Mapping с ключами "x"/"y" тоже принимается всеми операциями модуля.
    """

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


P = TypeVar("P", bound=PointLike)


class Vector(BaseModel):
    """
    Точка или смещение в 2D пространстве.

    Immutable модель (frozen=True): все операции создают новый экземпляр.
    Допускаются ±inf (см. MINIMAL_VECTOR / MAXIMAL_VECTOR).
    """

    x: float = Field(..., strict=True, description="Координата X")
    y: float = Field(..., strict=True, description="Координата Y")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, x: float, y: float) -> "Vector":
        """
        Vector(x, y) без keyword-аргументов.

        Прямой вызов Vector(x=..., y=...) при нечисловом значении бросает
        pydantic ValidationError; фабрика переводит его в InvalidArgument.

        Raises:
            InvalidArgument: Если x или y не число
        """
        try:
            return cls(x=x, y=y)
        except ValidationError as e:
            raise InvalidArgument(f"Cannot build Vector from {x!r}, {y!r}") from e

    @classmethod
    def broadcast(cls, value: float) -> "Vector":
        """
        Vector с одинаковым значением по обеим осям.

        Raises:
            InvalidArgument: Если value не число
        """
        if not is_number(value):
            raise InvalidArgument(f"Expected a number, got {value!r}")
        return cls(x=value, y=value)

    @classmethod
    def copy_of(cls, point: Any) -> "Vector":
        """
        Копия координат любого x/y объекта (новый экземпляр, не тот же объект).

        Raises:
            InvalidArgument: Если point не содержит числовых x/y
        """
        try:
            return cls(x=field_of(point, "x"), y=field_of(point, "y"))
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            raise InvalidArgument(f"Cannot copy coordinates from {point!r}") from e


VectorOperand = Union[float, PointLike]

ZERO_VECTOR: Final[Vector] = Vector(x=0.0, y=0.0)
MINIMAL_VECTOR: Final[Vector] = Vector(x=-math.inf, y=-math.inf)
MAXIMAL_VECTOR: Final[Vector] = Vector(x=math.inf, y=math.inf)


def as_vector(value: Any) -> Vector:
    """
    Приведение операнда к Vector.

    Принимает:
    - Vector (возвращается как есть)
    - число (broadcast на обе оси)
    - объект с атрибутами x/y или Mapping с ключами x/y
    - последовательность из двух чисел (x, y)

    Raises:
        InvalidArgument: Для любого другого значения
    """
    if isinstance(value, Vector):
        return value
    if is_number(value):
        return Vector.broadcast(value)
    if isinstance(value, Mapping) or (hasattr(value, "x") and hasattr(value, "y")):
        return Vector.copy_of(value)
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return Vector.of(value[0], value[1])

    raise InvalidArgument(f"Expected a number or a Vector-like object, got {value!r}")


def _coordinate(item: Any, axis: str) -> float:
    try:
        return field_of(item, axis)
    except (AttributeError, KeyError, TypeError) as e:
        raise InvalidArgument(f"{type(item).__name__} has no {axis!r} coordinate") from e


def _x(item: Any) -> float:
    return _coordinate(item, "x")


def _y(item: Any) -> float:
    return _coordinate(item, "y")


def _with_xy(item: P, **changes: float) -> P:
    """
    Копия item того же типа с обновлёнными x/y.

    Mapping копируется поверхностно: остальные ключи сохраняются.
    """
    if isinstance(item, Mapping):
        return {**item, **changes}
    if isinstance(item, BaseModel):
        return item.model_copy(update=changes)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.replace(item, **changes)
    if hasattr(item, "_replace"):
        return item._replace(**changes)

    raise InvalidArgument(f"Unsupported point-like type: {type(item).__name__}")


# =============================================================================
# MOVING
# =============================================================================


def move_by_x(item: P, delta: VectorOperand) -> P:
    """
    Сдвиг point-like объекта по оси X.

    Args:
        item: Объект с x/y
        delta: Число или Vector (используется delta.x)

    Returns:
        Новый объект того же типа
    """
    delta_vector = as_vector(delta)
    return _with_xy(item, x=_x(item) + delta_vector.x)


def move_by_y(item: P, delta: VectorOperand) -> P:
    """Сдвиг point-like объекта по оси Y."""
    delta_vector = as_vector(delta)
    return _with_xy(item, y=_y(item) + delta_vector.y)


def move_by_xy(item: P, delta: VectorOperand) -> P:
    """
    Сдвиг point-like объекта по обеим осям.

    Examples:
        >>> move_by_xy(Vector(x=1, y=2), 3)
        Vector(x=4.0, y=5.0)
    """
    delta_vector = as_vector(delta)
    return _with_xy(item, x=_x(item) + delta_vector.x, y=_y(item) + delta_vector.y)


def add_by_x(item: P, delta: VectorOperand) -> P:
    """Alias для move_by_x."""
    return move_by_x(item, delta)


def add_by_y(item: P, delta: VectorOperand) -> P:
    """Alias для move_by_y."""
    return move_by_y(item, delta)


def add_by_xy(item: P, delta: VectorOperand) -> P:
    """Alias для move_by_xy."""
    return move_by_xy(item, delta)


def subtract_by_x(item: P, delta: VectorOperand) -> P:
    """Сдвиг назад по оси X."""
    return move_by_x(item, multiply_by_xy(as_vector(delta), -1))


def subtract_by_y(item: P, delta: VectorOperand) -> P:
    """Сдвиг назад по оси Y."""
    return move_by_y(item, multiply_by_xy(as_vector(delta), -1))


def subtract_by_xy(item: P, delta: VectorOperand) -> P:
    """Сдвиг назад по обеим осям."""
    return move_by_xy(item, multiply_by_xy(as_vector(delta), -1))


# =============================================================================
# SCALING
# =============================================================================


def multiply_by_x(item: P, delta: VectorOperand) -> P:
    """Умножение координаты X."""
    delta_vector = as_vector(delta)
    return _with_xy(item, x=_x(item) * delta_vector.x)


def multiply_by_y(item: P, delta: VectorOperand) -> P:
    """Умножение координаты Y."""
    delta_vector = as_vector(delta)
    return _with_xy(item, y=_y(item) * delta_vector.y)


def multiply_by_xy(item: P, delta: VectorOperand) -> P:
    """Умножение обеих координат (число — одинаково, Vector — по осям)."""
    delta_vector = as_vector(delta)
    return _with_xy(item, x=_x(item) * delta_vector.x, y=_y(item) * delta_vector.y)


def divide_by_x(item: P, delta: VectorOperand) -> P:
    """
    Деление координаты X.

    Нулевой делитель — no-op: координата остаётся без изменений
    (не inf и не NaN).
    """
    delta_vector = as_vector(delta)
    return _with_xy(item, x=safe_divide(_x(item), delta_vector.x, fallback=_x(item)))


def divide_by_y(item: P, delta: VectorOperand) -> P:
    """Деление координаты Y (нулевой делитель — no-op)."""
    delta_vector = as_vector(delta)
    return _with_xy(item, y=safe_divide(_y(item), delta_vector.y, fallback=_y(item)))


def divide_by_xy(item: P, delta: VectorOperand) -> P:
    """
    Деление обеих координат.

    Каждая ось обрабатывается независимо: нулевой делитель по оси оставляет
    эту ось без изменений.

    Examples:
        >>> divide_by_xy(Vector(x=4, y=6), Vector(x=2, y=0))
        Vector(x=2.0, y=6.0)
    """
    delta_vector = as_vector(delta)
    return _with_xy(
        item,
        x=safe_divide(_x(item), delta_vector.x, fallback=_x(item)),
        y=safe_divide(_y(item), delta_vector.y, fallback=_y(item)),
    )


# =============================================================================
# COMPARISON
# =============================================================================


def eq_by_x(a: PointLike, b: PointLike) -> bool:
    """True, если векторы равны по X."""
    return eq_by(a, b, "x")


def eq_by_y(a: PointLike, b: PointLike) -> bool:
    """True, если векторы равны по Y."""
    return eq_by(a, b, "y")


def eq_by_xy(a: PointLike, b: PointLike) -> bool:
    """True, если векторы равны по обеим осям."""
    return eq_by_x(a, b) and eq_by_y(a, b)


def lt_by_x(a: PointLike, b: PointLike) -> bool:
    return lt_by(a, b, "x")


def lt_by_y(a: PointLike, b: PointLike) -> bool:
    return lt_by(a, b, "y")


def lt_by_xy(a: PointLike, b: PointLike) -> bool:
    """True, если a строго меньше b по обеим осям."""
    return lt_by_x(a, b) and lt_by_y(a, b)


def gt_by_x(a: PointLike, b: PointLike) -> bool:
    return gt_by(a, b, "x")


def gt_by_y(a: PointLike, b: PointLike) -> bool:
    return gt_by(a, b, "y")


def gt_by_xy(a: PointLike, b: PointLike) -> bool:
    """True, если a строго больше b по обеим осям."""
    return gt_by_x(a, b) and gt_by_y(a, b)


def le_by_x(a: PointLike, b: PointLike) -> bool:
    return le_by(a, b, "x")


def le_by_y(a: PointLike, b: PointLike) -> bool:
    return le_by(a, b, "y")


def le_by_xy(a: PointLike, b: PointLike) -> bool:
    """
    True, если a строго меньше b по обеим осям или равен b.

    Смешанные пары (меньше по X, равен по Y) дают False: это не
    покоординатное <=, а lt_by_xy OR eq_by_xy.
    """
    return lt_by_xy(a, b) or eq_by_xy(a, b)


def ge_by_x(a: PointLike, b: PointLike) -> bool:
    return ge_by(a, b, "x")


def ge_by_y(a: PointLike, b: PointLike) -> bool:
    return ge_by(a, b, "y")


def ge_by_xy(a: PointLike, b: PointLike) -> bool:
    """True, если a строго больше b по обеим осям или равен b."""
    return gt_by_xy(a, b) or eq_by_xy(a, b)


# =============================================================================
# SELECTION
# =============================================================================


def max_by_x(items: Sequence[P]) -> Optional[P]:
    """Элемент с максимальным X (первый при равенстве)."""
    return compare_and_select_by(items, gt_by_x)


def max_by_y(items: Sequence[P]) -> Optional[P]:
    """Элемент с максимальным Y (первый при равенстве)."""
    return compare_and_select_by(items, gt_by_y)


def max_by_xy(items: Sequence[PointLike]) -> Optional[Vector]:
    """
    Синтетический Vector из максимумов по каждой оси.

    Результат не обязан совпадать ни с одним входным элементом.
    """
    if not items:
        return None

    return Vector(x=_x(max_by_x(items)), y=_y(max_by_y(items)))


def min_by_x(items: Sequence[P]) -> Optional[P]:
    """Элемент с минимальным X (первый при равенстве)."""
    return compare_and_select_by(items, lt_by_x)


def min_by_y(items: Sequence[P]) -> Optional[P]:
    """Элемент с минимальным Y (первый при равенстве)."""
    return compare_and_select_by(items, lt_by_y)


def min_by_xy(items: Sequence[PointLike]) -> Optional[Vector]:
    """Синтетический Vector из минимумов по каждой оси."""
    if not items:
        return None

    return Vector(x=_x(min_by_x(items)), y=_y(min_by_y(items)))


def avg_by_xy(items: Sequence[PointLike]) -> Optional[Vector]:
    """
    Центр bounding box набора точек.

    Это НЕ среднее арифметическое: min + (max - min) / 2 по каждой оси.

    Examples:
        >>> avg_by_xy([Vector(x=0, y=0), Vector(x=1, y=1), Vector(x=10, y=4)])
        Vector(x=5.0, y=2.0)
    """
    if not items:
        return None

    max_vector = max_by_xy(items)
    min_vector = min_by_xy(items)

    return Vector(
        x=min_vector.x + (max_vector.x - min_vector.x) / 2,
        y=min_vector.y + (max_vector.y - min_vector.y) / 2,
    )


# =============================================================================
# FILTERING
# =============================================================================


def same_by_x(items: Optional[Iterable[P]], item: PointLike) -> list[P]:
    """Элементы с тем же X, что у item (порядок сохраняется). None → []."""
    return [i for i in items or [] if eq_by_x(item, i)]


def same_by_y(items: Optional[Iterable[P]], item: PointLike) -> list[P]:
    """Элементы с тем же Y, что у item (порядок сохраняется). None → []."""
    return [i for i in items or [] if eq_by_y(item, i)]


def same_by_xy(items: Optional[Iterable[P]], item: PointLike) -> list[P]:
    """Элементы, совпадающие с item по обеим осям."""
    return [i for i in items or [] if eq_by_xy(item, i)]
