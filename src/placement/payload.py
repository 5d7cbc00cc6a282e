"""
Payload — загрузка и выгрузка примитивов как plain dict

Payload'ы проверяются JSON Schema контрактами (src.core.contracts) перед
созданием моделей. Нарушение контракта → InvalidArgument с исходной
jsonschema.ValidationError в __cause__.
"""

import logging
from typing import Any, Dict, List

from jsonschema import ValidationError

from src.core.contracts import LayoutValidator, LineValidator, SquareValidator, VectorValidator
from src.core.contracts.validators import ContractValidator
from src.placement.common import InvalidArgument
from src.placement.line import Line
from src.placement.square import Square
from src.placement.vector import Vector

logger = logging.getLogger(__name__)


def _check(validator: ContractValidator, data: Any) -> None:
    try:
        validator.validate(data)
    except ValidationError as e:
        logger.debug("Rejected %s payload %r: %s", validator.schema_name, data, e.message)
        raise InvalidArgument(f"Invalid {validator.schema_name} payload: {e.message}") from e


# =============================================================================
# LOADING
# =============================================================================


def load_vector(data: Dict[str, Any]) -> Vector:
    """
    Vector из payload {"x": ..., "y": ...}.

    Raises:
        InvalidArgument: Если payload не соответствует контракту
    """
    _check(VectorValidator(), data)
    return Vector(x=data["x"], y=data["y"])


def load_line(data: Dict[str, Any]) -> Line:
    """Line из payload {"v1": vector, "v2": vector}."""
    _check(LineValidator(), data)
    return Line(v1=load_vector(data["v1"]), v2=load_vector(data["v2"]))


def load_square(data: Dict[str, Any]) -> Square:
    """
    Square из payload.

    Формы:
    - {"v1": vector, "v2": vector}
    - {"v1": vector, "width": number, "height": number}
    """
    _check(SquareValidator(), data)
    corner = load_vector(data["v1"])
    if "v2" in data:
        return Square.from_corners(corner, load_vector(data["v2"]))
    return Square.from_size(corner, data["width"], data["height"])


def load_layout(data: List[Dict[str, Any]]) -> List[Square]:
    """
    Список Square из layout payload (непустой список square payload'ов).

    Результат готов для outline(): контракт гарантирует хотя бы один элемент.

    Raises:
        InvalidArgument: Если payload не соответствует контракту
    """
    _check(LayoutValidator(), data)
    return [load_square(item) for item in data]


# =============================================================================
# DUMPING
# =============================================================================


def dump_vector(item: Vector) -> Dict[str, float]:
    return {"x": item.x, "y": item.y}


def dump_line(item: Line) -> Dict[str, Dict[str, float]]:
    return {"v1": dump_vector(item.v1), "v2": dump_vector(item.v2)}


def dump_square(item: Square) -> Dict[str, Dict[str, float]]:
    """Square в форме двух углов (v1 — start, v2 — end)."""
    return {"v1": dump_vector(item.v1), "v2": dump_vector(item.v2)}


def dump_layout(items: List[Square]) -> List[Dict[str, Dict[str, float]]]:
    return [dump_square(item) for item in items]
