"""
Square — осе-ориентированный прямоугольник

Immutable Pydantic модель по двум противоположным углам (v1, v2).

Углы нормализуются при создании: v1 — покоординатный минимум (start),
v2 — покоординатный максимум (end). Поэтому point_in_square и
by_square_point корректны при любом порядке углов на входе.

Якорные точки (anchor points) — сетка 3x3:

    ------------------
    |s-s   c-s   e-s |
    |s-c   c-c   e-c |
    |s-e   c-e   e-e |
    ------------------

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. v1 <= v2 по каждой оси
2. outline(items) содержит все углы всех items; пустой вход → None
3. in/out/cross классификация проверяет только углы: перекрытие "крестом"
   (ни один угол не внутри другого) классифицируется как out_square
"""

import logging
import math
from enum import Enum
from typing import Any, NamedTuple, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError, model_validator

from src.core.math.numerical_safeguards import is_nan
from src.placement.common import InvalidArgument, is_number
from src.placement.line import Line
from src.placement.vector import PointLike, Vector, as_vector, max_by_xy, min_by_xy

logger = logging.getLogger(__name__)


def _ordered(a: float, b: float) -> tuple[float, float]:
    """
    Пара (min, max) по одной оси.

    NaN в любом из углов даёт (NaN, NaN) независимо от порядка аргументов.
    """
    if is_nan(a) or is_nan(b):
        return math.nan, math.nan
    return min(a, b), max(a, b)


# =============================================================================
# SQUARE MODEL
# =============================================================================


class Square(BaseModel):
    """
    Прямоугольник, заданный углами v1 (start) и v2 (end).

    Создание:
    - Square(v1=..., v2=...) или Square.from_corners(a, b) — два угла
    - Square.from_size(corner, width, height) — угол + размеры
    """

    v1: Vector
    v2: Vector

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_corners(cls, data: Any) -> Any:
        """Приведение углов к Vector и упорядочивание: v1 = min, v2 = max."""
        if not isinstance(data, dict) or "v1" not in data or "v2" not in data:
            return data

        a = as_vector(data["v1"])
        b = as_vector(data["v2"])
        start_x, end_x = _ordered(a.x, b.x)
        start_y, end_y = _ordered(a.y, b.y)
        return {
            **data,
            "v1": Vector(x=start_x, y=start_y),
            "v2": Vector(x=end_x, y=end_y),
        }

    @classmethod
    def from_corners(cls, v1: Any, v2: Any) -> "Square":
        """
        Прямоугольник по двум противоположным углам (в любом порядке).

        Raises:
            InvalidArgument: Если угол не приводится к Vector
        """
        try:
            return cls(v1=v1, v2=v2)
        except ValidationError as e:
            raise InvalidArgument(f"Cannot build Square from {v1!r}, {v2!r}") from e

    @classmethod
    def from_size(cls, corner: Any, width: float, height: float) -> "Square":
        """
        Прямоугольник по углу и размерам: второй угол = corner + (width, height).

        Нулевые размеры допустимы (вырожденный прямоугольник), отрицательные
        откладываются в обратную сторону и нормализуются.

        Raises:
            InvalidArgument: Если corner не приводится к Vector или размеры не числа
        """
        if not is_number(width) or not is_number(height):
            raise InvalidArgument(f"width/height must be numbers, got {width!r}, {height!r}")

        start = as_vector(corner)
        return cls.from_corners(start, Vector(x=start.x + width, y=start.y + height))

    @property
    def width(self) -> float:
        return abs(self.v1.x - self.v2.x)

    @property
    def height(self) -> float:
        return abs(self.v1.y - self.v2.y)

    @property
    def size(self) -> Vector:
        """Размер как Vector(width, height)."""
        return Vector(x=self.width, y=self.height)


# =============================================================================
# ANCHORS
# =============================================================================


class Anchor(str, Enum):
    """Позиция якорной точки вдоль оси"""

    START = "start"
    CENTER = "center"
    END = "end"


AnchorLike = Union[Anchor, str]

_ANCHOR_HANDLERS = {
    Anchor.START: lambda pos, length: pos,
    Anchor.CENTER: lambda pos, length: pos + length / 2,
    Anchor.END: lambda pos, length: pos + length,
}


def _as_anchor(value: AnchorLike) -> Anchor:
    try:
        return Anchor(value)
    except ValueError as e:
        raise InvalidArgument(f"Unknown anchor {value!r}, expected start/center/end") from e


def by_square_point(item: Square, x: AnchorLike, y: AnchorLike) -> Vector:
    """
    Якорная точка прямоугольника.

    start → координата v1, center → v1 + size / 2, end → v1 + size.

    Args:
        item: Прямоугольник
        x: Якорь по оси X
        y: Якорь по оси Y

    Returns:
        Новый Vector

    Raises:
        InvalidArgument: Для неизвестного якоря

    Examples:
        >>> sq = Square.from_corners(Vector(x=0, y=0), Vector(x=10, y=20))
        >>> by_square_point(sq, "center", "center")
        Vector(x=5.0, y=10.0)
    """
    return Vector(
        x=_ANCHOR_HANDLERS[_as_anchor(x)](item.v1.x, item.width),
        y=_ANCHOR_HANDLERS[_as_anchor(y)](item.v1.y, item.height),
    )


# =============================================================================
# COMPARISON
# =============================================================================


def point_in_square(a: Square, b: PointLike) -> bool:
    """True, если точка b внутри замкнутого прямоугольника a (границы включены)."""
    return a.v1.x <= b.x <= a.v2.x and a.v1.y <= b.y <= a.v2.y


def in_square(a: Square, b: Square) -> bool:
    """True, если все углы b внутри a."""
    return all(point_in_square(a, corner) for corner in square_corner_points(b))


def out_square(a: Square, b: Square) -> bool:
    """
    True, если ни один угол b не внутри a.

    Проверяются только углы: перекрытие "крестом" (полосы, пересекающиеся
    без взаимного вхождения углов) тоже даёт True.
    """
    return all(not point_in_square(a, corner) for corner in square_corner_points(b))


def cross_square(a: Square, b: Square) -> bool:
    """True для частичного перекрытия: не in_square и не out_square."""
    return not in_square(a, b) and not out_square(a, b)


# =============================================================================
# SELECTION
# =============================================================================


class SquareLines(NamedTuple):
    """Основные линии прямоугольника"""

    vertical: list[Line]
    horizontal: list[Line]
    diagonal: list[Line]


def outline(items: Sequence[Square]) -> Optional[Square]:
    """
    Bounding box набора прямоугольников.

    Args:
        items: Прямоугольники

    Returns:
        Минимальный прямоугольник, содержащий все items, или None для
        пустого входа
    """
    if not items:
        logger.debug("outline: empty input")
        return None

    end_corner = max_by_xy([by_square_point(item, Anchor.END, Anchor.END) for item in items])
    start_corner = min_by_xy(
        [by_square_point(item, Anchor.START, Anchor.START) for item in items]
    )

    return Square.from_corners(start_corner, end_corner)


def square_lines(item: Square) -> SquareLines:
    """
    Основные линии: вертикали (левая/центр/правая, на всю высоту),
    горизонтали (верх/середина/низ, на всю ширину) и две диагонали.
    """
    s, c, e = Anchor.START, Anchor.CENTER, Anchor.END
    return SquareLines(
        vertical=[
            Line(v1=by_square_point(item, s, s), v2=by_square_point(item, s, e)),
            Line(v1=by_square_point(item, c, s), v2=by_square_point(item, c, e)),
            Line(v1=by_square_point(item, e, s), v2=by_square_point(item, e, e)),
        ],
        horizontal=[
            Line(v1=by_square_point(item, s, s), v2=by_square_point(item, e, s)),
            Line(v1=by_square_point(item, s, c), v2=by_square_point(item, e, c)),
            Line(v1=by_square_point(item, s, e), v2=by_square_point(item, e, e)),
        ],
        diagonal=[
            Line(v1=by_square_point(item, s, s), v2=by_square_point(item, e, e)),
            Line(v1=by_square_point(item, e, s), v2=by_square_point(item, s, e)),
        ],
    )


def square_points(item: Square) -> list[Vector]:
    """Все 9 якорных точек, порядок: X-якорь, затем Y-якорь (start, center, end)."""
    return [by_square_point(item, x, y) for x in Anchor for y in Anchor]


def square_corner_points(item: Square) -> list[Vector]:
    """4 угла: (s,s), (s,e), (e,s), (e,e)."""
    return [
        by_square_point(item, Anchor.START, Anchor.START),
        by_square_point(item, Anchor.START, Anchor.END),
        by_square_point(item, Anchor.END, Anchor.START),
        by_square_point(item, Anchor.END, Anchor.END),
    ]
