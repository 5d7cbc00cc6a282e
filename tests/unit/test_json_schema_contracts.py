"""
Tests for JSON Schema Contract Validators and payload loading

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей и типов
- Две формы square payload (углы / угол + размеры)
- Общая vector схема через $ref и layout контракт
- Интеграция с Pydantic моделями через src.placement.payload
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
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
from src.placement import (
    InvalidArgument,
    Line,
    Square,
    Vector,
    dump_layout,
    dump_line,
    dump_square,
    dump_vector,
    load_layout,
    load_line,
    load_square,
    load_vector,
    outline,
)


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_vector():
    """Валидный vector payload."""
    return {"x": 1.5, "y": -2}


@pytest.fixture
def valid_line():
    """Валидный line payload."""
    return {"v1": {"x": 0, "y": 0}, "v2": {"x": 3, "y": 4}}


@pytest.fixture
def valid_square_corners():
    """Square payload в форме двух углов."""
    return {"v1": {"x": 10, "y": 20}, "v2": {"x": 0, "y": 0}}


@pytest.fixture
def valid_square_size():
    """Square payload в форме угол + размеры."""
    return {"v1": {"x": 2, "y": 3}, "width": 10, "height": 5}


# =============================================================================
# SCHEMA LOADER TESTS
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем"""

    @pytest.mark.parametrize("name", ["vector", "line", "square", "layout"])
    def test_schemas_load_and_are_cached(self, name: str) -> None:
        loader = SchemaLoader()
        schema = loader.load_schema(name)
        assert schema["$schema"].endswith("2020-12/schema")
        assert loader.load_schema(name) is schema

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("circle")

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_registry_indexes_schemas_by_id(self) -> None:
        registry = SchemaLoader().registry()
        for name in ("vector", "line", "square", "layout"):
            assert registry.contents(f"urn:placement:{name}")["title"] == name.capitalize()

    def test_vector_defined_once(self) -> None:
        """line/square ссылаются на общую vector схему, а не копируют её"""
        loader = SchemaLoader()
        for name in ("line", "square"):
            schema = loader.load_schema(name)
            assert "$defs" not in schema
            assert schema["properties"]["v1"] == {"$ref": "urn:placement:vector"}

    def test_registry_requires_id(self, tmp_path) -> None:
        (tmp_path / "anonymous.json").write_text(json.dumps({"type": "object"}), encoding="utf-8")
        with pytest.raises(ValueError, match=r"has no \$id"):
            SchemaLoader(tmp_path).registry()


# =============================================================================
# VALIDATOR TESTS
# =============================================================================


class TestVectorContract:
    """Тесты vector контракта"""

    def test_valid(self, valid_vector) -> None:
        validate_vector(valid_vector)
        assert VectorValidator().is_valid(valid_vector)

    def test_missing_field(self) -> None:
        with pytest.raises(ValidationError):
            validate_vector({"x": 1})

    @pytest.mark.parametrize("value", ["1", None, True, [1]])
    def test_wrong_type(self, value) -> None:
        assert VectorValidator().is_valid({"x": value, "y": 0}) is False

    def test_iter_errors_reports_all(self) -> None:
        errors = list(VectorValidator().iter_errors({"x": "a", "y": "b"}))
        assert len(errors) == 2


class TestLineContract:
    """Тесты line контракта"""

    def test_valid(self, valid_line) -> None:
        validate_line(valid_line)

    def test_nested_vector_checked(self) -> None:
        with pytest.raises(ValidationError):
            validate_line({"v1": {"x": 0, "y": 0}, "v2": {"x": 3}})

    def test_missing_endpoint(self) -> None:
        assert LineValidator().is_valid({"v1": {"x": 0, "y": 0}}) is False


class TestSquareContract:
    """Тесты square контракта"""

    def test_corner_form(self, valid_square_corners) -> None:
        validate_square(valid_square_corners)

    def test_size_form(self, valid_square_size) -> None:
        validate_square(valid_square_size)

    def test_mixed_forms_rejected(self) -> None:
        """v2 вместе с width/height недопустим"""
        payload = {"v1": {"x": 0, "y": 0}, "v2": {"x": 1, "y": 1}, "width": 1, "height": 1}
        assert SquareValidator().is_valid(payload) is False

    def test_partial_size_rejected(self) -> None:
        assert SquareValidator().is_valid({"v1": {"x": 0, "y": 0}, "width": 1}) is False

    def test_corner_only_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_square({"v1": {"x": 0, "y": 0}})

    def test_square_model_accepted(self) -> None:
        """Square модель валидируется напрямую, без ручного dump"""
        square = Square.from_size(Vector(x=1, y=2), 3, 4)
        validate_square(square)
        assert VectorValidator().is_valid(square.v2)

    def test_nested_vector_ref_checked(self) -> None:
        errors = list(SquareValidator().iter_errors({"v1": {"x": 0}, "v2": {"x": 1, "y": 1}}))
        assert any("'y' is a required property" in e.message for e in errors)


class TestLayoutContract:
    """Тесты layout контракта"""

    def test_mixed_square_forms(self, valid_square_corners, valid_square_size) -> None:
        validate_layout([valid_square_corners, valid_square_size])

    def test_models_accepted(self) -> None:
        squares = [Square.from_size(Vector(x=0, y=0), 1, 1), Square.from_size(Vector(x=5, y=5), 1, 1)]
        assert LayoutValidator().is_valid(squares)

    def test_empty_layout_rejected(self) -> None:
        """outline пустого набора не определён, поэтому пустой layout недопустим"""
        with pytest.raises(ValidationError):
            validate_layout([])

    def test_invalid_item_rejected(self, valid_square_corners) -> None:
        assert LayoutValidator().is_valid([valid_square_corners, {"v1": {"x": 0, "y": 0}}]) is False

    def test_object_rejected(self, valid_square_corners) -> None:
        assert LayoutValidator().is_valid(valid_square_corners) is False


# =============================================================================
# PAYLOAD INTEGRATION TESTS
# =============================================================================


class TestPayload:
    """Тесты load_* / dump_*"""

    def test_load_vector(self, valid_vector) -> None:
        assert load_vector(valid_vector) == Vector(x=1.5, y=-2)

    def test_load_line(self, valid_line) -> None:
        result = load_line(valid_line)
        assert isinstance(result, Line)
        assert result.length == 5

    def test_load_square_corners_normalized(self, valid_square_corners) -> None:
        result = load_square(valid_square_corners)
        assert result == Square.from_corners(Vector(x=0, y=0), Vector(x=10, y=20))

    def test_load_square_size(self, valid_square_size) -> None:
        result = load_square(valid_square_size)
        assert result.v1 == Vector(x=2, y=3)
        assert result.v2 == Vector(x=12, y=8)

    def test_contract_violation_raises_invalid_argument(self) -> None:
        with pytest.raises(InvalidArgument, match="Invalid vector payload") as exc_info:
            load_vector({"x": "1", "y": 2})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_invalid_square_payload(self) -> None:
        with pytest.raises(InvalidArgument, match="Invalid square payload"):
            load_square({"v1": {"x": 0, "y": 0}, "width": 1})

    def test_dump_matches_contracts(self) -> None:
        square = Square.from_size(Vector(x=1, y=1), 2, 3)
        line = Line(v1=Vector(x=0, y=0), v2=Vector(x=1, y=1))

        assert VectorValidator().is_valid(dump_vector(square.v1))
        assert LineValidator().is_valid(dump_line(line))
        assert SquareValidator().is_valid(dump_square(square))
        assert dump_square(square) == {"v1": {"x": 1, "y": 1}, "v2": {"x": 3, "y": 4}}

    def test_dump_then_load_through_json(self) -> None:
        square = Square.from_corners(Vector(x=5, y=0), Vector(x=-1, y=7.5))
        restored = load_square(json.loads(json.dumps(dump_square(square))))
        assert restored == square

    def test_load_layout_feeds_outline(self, valid_square_corners, valid_square_size) -> None:
        squares = load_layout([valid_square_corners, valid_square_size])
        assert [type(item) for item in squares] == [Square, Square]
        assert outline(squares) == Square.from_corners(Vector(x=0, y=0), Vector(x=12, y=20))

    def test_invalid_layout_payload(self) -> None:
        with pytest.raises(InvalidArgument, match="Invalid layout payload"):
            load_layout([])

    def test_dump_layout_then_load(self) -> None:
        squares = [Square.from_size(Vector(x=0, y=0), 2, 2), Square.from_size(Vector(x=-3, y=1), 1, 4)]
        payload = dump_layout(squares)
        assert LayoutValidator().is_valid(payload)
        assert load_layout(json.loads(json.dumps(payload))) == squares
