"""
Placement — Vectors, Lines, Squares для позиционирования на 2D плоскости.

Чистые синхронные функции над immutable моделями: каждая операция создаёт
новый результат и не изменяет входные значения.
"""

# Comparator utilities
from src.placement.common import (
    InvalidArgument,
    compare_and_select_by,
    eq_by,
    ge_by,
    gt_by,
    is_number,
    le_by,
    lt_by,
)

# Vector
from src.placement.vector import (
    MAXIMAL_VECTOR,
    MINIMAL_VECTOR,
    ZERO_VECTOR,
    PointLike,
    Vector,
    add_by_x,
    add_by_xy,
    add_by_y,
    as_vector,
    avg_by_xy,
    divide_by_x,
    divide_by_xy,
    divide_by_y,
    eq_by_x,
    eq_by_xy,
    eq_by_y,
    ge_by_x,
    ge_by_xy,
    ge_by_y,
    gt_by_x,
    gt_by_xy,
    gt_by_y,
    le_by_x,
    le_by_xy,
    le_by_y,
    lt_by_x,
    lt_by_xy,
    lt_by_y,
    max_by_x,
    max_by_xy,
    max_by_y,
    min_by_x,
    min_by_xy,
    min_by_y,
    move_by_x,
    move_by_xy,
    move_by_y,
    multiply_by_x,
    multiply_by_xy,
    multiply_by_y,
    same_by_x,
    same_by_xy,
    same_by_y,
    subtract_by_x,
    subtract_by_xy,
    subtract_by_y,
)

# Line
from src.placement.line import (
    Line,
    cross_by_line,
    eq_by_length,
    ge_by_length,
    gt_by_length,
    le_by_length,
    lt_by_length,
    max_by_length,
    min_by_length,
)

# Square
from src.placement.square import (
    Anchor,
    Square,
    SquareLines,
    by_square_point,
    cross_square,
    in_square,
    out_square,
    outline,
    point_in_square,
    square_corner_points,
    square_lines,
    square_points,
)

# Payload
from src.placement.payload import (
    dump_layout,
    dump_line,
    dump_square,
    dump_vector,
    load_layout,
    load_line,
    load_square,
    load_vector,
)

__all__ = [
    # Common
    "InvalidArgument",
    "compare_and_select_by",
    "eq_by",
    "ge_by",
    "gt_by",
    "is_number",
    "le_by",
    "lt_by",
    # Vector — Model & constants
    "Vector",
    "PointLike",
    "ZERO_VECTOR",
    "MINIMAL_VECTOR",
    "MAXIMAL_VECTOR",
    "as_vector",
    # Vector — Arithmetic
    "move_by_x",
    "move_by_y",
    "move_by_xy",
    "add_by_x",
    "add_by_y",
    "add_by_xy",
    "subtract_by_x",
    "subtract_by_y",
    "subtract_by_xy",
    "multiply_by_x",
    "multiply_by_y",
    "multiply_by_xy",
    "divide_by_x",
    "divide_by_y",
    "divide_by_xy",
    # Vector — Comparison
    "eq_by_x",
    "eq_by_y",
    "eq_by_xy",
    "lt_by_x",
    "lt_by_y",
    "lt_by_xy",
    "gt_by_x",
    "gt_by_y",
    "gt_by_xy",
    "le_by_x",
    "le_by_y",
    "le_by_xy",
    "ge_by_x",
    "ge_by_y",
    "ge_by_xy",
    # Vector — Selection
    "max_by_x",
    "max_by_y",
    "max_by_xy",
    "min_by_x",
    "min_by_y",
    "min_by_xy",
    "avg_by_xy",
    "same_by_x",
    "same_by_y",
    "same_by_xy",
    # Line
    "Line",
    "cross_by_line",
    "eq_by_length",
    "lt_by_length",
    "gt_by_length",
    "le_by_length",
    "ge_by_length",
    "max_by_length",
    "min_by_length",
    # Square
    "Anchor",
    "Square",
    "SquareLines",
    "by_square_point",
    "point_in_square",
    "in_square",
    "out_square",
    "cross_square",
    "outline",
    "square_lines",
    "square_points",
    "square_corner_points",
    # Payload
    "load_vector",
    "load_line",
    "load_square",
    "load_layout",
    "dump_vector",
    "dump_line",
    "dump_square",
    "dump_layout",
]
