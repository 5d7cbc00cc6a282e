"""
JSON Schema Contract Validators

Модуль для валидации JSON payload'ов геометрических примитивов согласно
формальным JSON Schema контрактам (библиотека jsonschema, Draft 2020-12).

Схемы (src/core/contracts/schema/):
- vector.json  — urn:placement:vector
- line.json    — urn:placement:line   (v1/v2 → $ref vector)
- square.json  — urn:placement:square (v1/v2 → $ref vector)
- layout.json  — urn:placement:layout (непустой список square)

Схемы ссылаются друг на друга по $id, ссылки разрешаются через общий
referencing.Registry, собранный SchemaLoader'ом из каталога схем.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Vector описан ровно в одной схеме; line/square/layout ссылаются на неё
2. Валидаторы принимают как plain dict/list, так и pydantic модели
   (Vector, Line, Square): модели приводятся через model_dump()
"""

import json
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator
from pydantic import BaseModel
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

VECTOR_SCHEMA: Final[str] = "vector"
LINE_SCHEMA: Final[str] = "line"
SQUARE_SCHEMA: Final[str] = "square"
LAYOUT_SCHEMA: Final[str] = "layout"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат рядом с модулем (src/core/contracts/schema/), кэшируются
    после первой загрузки и регистрируются в Registry по своему $id.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._registry: Optional[Registry] = None

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'vector')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def registry(self) -> Registry:
        """
        Registry всех схем каталога, ключ — $id схемы.

        Raises:
            ValueError: Если у схемы нет $id или $id повторяется
        """
        if self._registry is not None:
            return self._registry

        resources: Dict[str, Resource] = {}
        for schema_path in sorted(self._schema_dir.glob("*.json")):
            schema = self.load_schema(schema_path.stem)
            uri = schema.get("$id")
            if not uri:
                raise ValueError(f"Schema {schema_path.name} has no $id")
            if uri in resources:
                raise ValueError(f"Duplicate schema $id {uri!r} in {schema_path.name}")
            resources[uri] = DRAFT202012.create_resource(schema)

        self._registry = Registry().with_resources(resources.items())
        return self._registry


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


def _as_payload(data: Any) -> Any:
    """pydantic модели (и списки моделей) → plain dict/list."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if isinstance(data, (list, tuple)):
        return [_as_payload(item) for item in data]
    return data


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Args:
        schema_name: Имя схемы без расширения
        loader: Загрузчик схем (по умолчанию общий для модуля)
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        loader = loader or _SCHEMA_LOADER
        self.schema_name = schema_name
        self.schema = loader.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema, registry=loader.registry())

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(_as_payload(data))

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(_as_payload(data))

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(_as_payload(data))


class VectorValidator(ContractValidator):
    """Валидатор для vector контракта."""

    def __init__(self):
        super().__init__(VECTOR_SCHEMA)


class LineValidator(ContractValidator):
    """Валидатор для line контракта."""

    def __init__(self):
        super().__init__(LINE_SCHEMA)


class SquareValidator(ContractValidator):
    """
    Валидатор для square контракта.

    Допустимы ровно две формы: {v1, v2} или {v1, width, height}.
    """

    def __init__(self):
        super().__init__(SQUARE_SCHEMA)


class LayoutValidator(ContractValidator):
    """Валидатор для layout контракта: непустой список square."""

    def __init__(self):
        super().__init__(LAYOUT_SCHEMA)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_vector(data: Any) -> None:
    """
    Валидация vector данных.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    VectorValidator().validate(data)


def validate_line(data: Any) -> None:
    LineValidator().validate(data)


def validate_square(data: Any) -> None:
    SquareValidator().validate(data)


def validate_layout(data: List[Any]) -> None:
    """
    Валидация layout данных (список square payload'ов или Square моделей).

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    LayoutValidator().validate(data)
