"""
Line — отрезок между двумя Vector

Immutable Pydantic модель (v1, v2) с производной длиной, сравнения и выбор
экстремумов по длине, проверка пересечения отрезков.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевая длина (v1 == v2) допустима
2. cross_by_line: det == 0 (параллельные/коллинеарные) → False
3. cross_by_line: пересечение только строго внутри (0, 1) по обоим
   параметрам, касание концами не считается
"""

import logging
import math
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ValidationError, field_validator

from src.core.math.numerical_safeguards import is_valid_float
from src.placement.common import (
    InvalidArgument,
    compare_and_select_by,
    eq_by,
    ge_by,
    gt_by,
    le_by,
    lt_by,
)
from src.placement.vector import Vector, as_vector

logger = logging.getLogger(__name__)


# =============================================================================
# LINE MODEL
# =============================================================================


class Line(BaseModel):
    """
    Отрезок (направленный или нет) между точками v1 и v2.

    Концы принимают всё, что принимает as_vector (число — broadcast).
    """

    v1: Vector
    v2: Vector

    model_config = {"frozen": True}

    @field_validator("v1", "v2", mode="before")
    @classmethod
    def coerce_endpoint(cls, v: Any) -> Vector:
        return as_vector(v)

    @classmethod
    def between(cls, v1: Any, v2: Any) -> "Line":
        """
        Line(v1, v2) без keyword-аргументов.

        Raises:
            InvalidArgument: Если конец не приводится к Vector
        """
        try:
            return cls(v1=v1, v2=v2)
        except ValidationError as e:
            raise InvalidArgument(f"Cannot build Line from {v1!r}, {v2!r}") from e

    @property
    def length(self) -> float:
        """Евклидово расстояние между концами."""
        return math.hypot(self.v2.x - self.v1.x, self.v2.y - self.v1.y)


# =============================================================================
# COMPARISON
# =============================================================================


def eq_by_length(a: Line, b: Line) -> bool:
    """True, если длины равны."""
    return eq_by(a, b, "length")


def lt_by_length(a: Line, b: Line) -> bool:
    """True, если a короче b."""
    return lt_by(a, b, "length")


def gt_by_length(a: Line, b: Line) -> bool:
    """True, если a длиннее b."""
    return gt_by(a, b, "length")


def le_by_length(a: Line, b: Line) -> bool:
    return le_by(a, b, "length")


def ge_by_length(a: Line, b: Line) -> bool:
    return ge_by(a, b, "length")


def cross_by_line(a: Line, b: Line) -> bool:
    """
    Проверка пересечения двух отрезков.

    Параметрическое решение: det направляющих векторов, затем параметры
    lambda (вдоль a) и gamma (вдоль b).

    Args:
        a: Первый отрезок
        b: Второй отрезок

    Returns:
        True только если 0 < lambda < 1 и 0 < gamma < 1.
        False для параллельных и коллинеарных отрезков (det == 0),
        для касания концами и для нечислового det (бесконечные концы).

    Examples:
        >>> diag_1 = Line.between(Vector(x=0, y=0), Vector(x=4, y=4))
        >>> diag_2 = Line.between(Vector(x=0, y=4), Vector(x=4, y=0))
        >>> cross_by_line(diag_1, diag_2)
        True
    """
    det = (a.v2.x - a.v1.x) * (b.v2.y - b.v1.y) - (b.v2.x - b.v1.x) * (a.v2.y - a.v1.y)
    if det == 0:
        logger.debug("cross_by_line: parallel or collinear segments %s, %s", a, b)
        return False
    if not is_valid_float(det):
        logger.debug("cross_by_line: non-finite determinant %s", det)
        return False

    lambda_ = (
        (b.v2.y - b.v1.y) * (b.v2.x - a.v1.x) + (b.v1.x - b.v2.x) * (b.v2.y - a.v1.y)
    ) / det
    gamma = (
        (a.v1.y - a.v2.y) * (b.v2.x - a.v1.x) + (a.v2.x - a.v1.x) * (b.v2.y - a.v1.y)
    ) / det

    return (0 < lambda_ < 1) and (0 < gamma < 1)


# =============================================================================
# SELECTION
# =============================================================================


def max_by_length(items: Sequence[Line]) -> Optional[Line]:
    """Самый длинный отрезок (первый при равенстве), None для пустого входа."""
    return compare_and_select_by(items, gt_by_length)


def min_by_length(items: Sequence[Line]) -> Optional[Line]:
    """Самый короткий отрезок (первый при равенстве), None для пустого входа."""
    return compare_and_select_by(items, lt_by_length)
