"""
test_normalize.py - 입력 정규화 테스트

테스트 대상:
- normalize_input: Mapping / JsonSerializable / SimpleNamespace / to_dict()
- 우선순위, 에러 메시지
"""

from collections import OrderedDict
from dataclasses import asdict, dataclass
from types import MappingProxyType, SimpleNamespace

import pytest

from jinja_renderer.core.normalize import normalize_input
from jinja_renderer.domain.constants import OBJECT_SINGLE_VAR_KEY
from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError

# =============================================================================
# Test Objects
# =============================================================================


class SerializableMessage:
    def __init__(self, message, lucky_numbers=None):
        self.message = message
        self.lucky_numbers = lucky_numbers

    def json_serialize(self):
        if self.lucky_numbers is None:
            return self.message
        return {"message": self.message, "luckyNumbers": self.lucky_numbers}


@dataclass
class MessageSchema:
    message: str
    luckyNumbers: list[int]

    def to_dict(self):
        return asdict(self)


class BrokenToDict:
    def to_dict(self):
        return ["not", "a", "mapping"]


class Both:
    """json_serialize와 to_dict를 모두 가진 객체."""

    def json_serialize(self):
        return {"via": "json_serialize"}

    def to_dict(self):
        return {"via": "to_dict"}


class Plain:
    pass


# =============================================================================
# Mapping
# =============================================================================


class TestMappingInput:
    """Mapping 입력."""

    def test_dict_used_as_is(self):
        data = {"a": 1, "b": 2}

        assert normalize_input(data) == {"a": 1, "b": 2}

    def test_returns_copy(self):
        """원본 dict와 공유하지 않음."""
        data = {"a": 1}

        result = normalize_input(data)
        result["b"] = 2

        assert data == {"a": 1}

    def test_other_mapping_types(self):
        """dict가 아닌 Mapping도 허용."""
        assert normalize_input(MappingProxyType({"x": 1})) == {"x": 1}
        assert list(normalize_input(OrderedDict([("b", 1), ("a", 2)]))) == ["b", "a"]

    def test_empty_mapping(self):
        assert normalize_input({}) == {}

    def test_non_string_key_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_input({1: "one"})

        assert exc_info.value.code == ErrorCodes.INVALID_VARIABLE_NAME
        assert "variable names to be strings" in str(exc_info.value)


# =============================================================================
# JsonSerializable
# =============================================================================


class TestJsonSerializableInput:
    """json_serialize() 객체."""

    def test_mapping_result(self):
        result = normalize_input(SerializableMessage("Hello world!", [1, 3, 5]))

        assert result == {"message": "Hello world!", "luckyNumbers": [1, 3, 5]}

    def test_scalar_result_wrapped(self):
        """scalar → object_single_var 키 하나."""
        result = normalize_input(SerializableMessage("hi"))

        assert result == {OBJECT_SINGLE_VAR_KEY: "hi"}
        assert OBJECT_SINGLE_VAR_KEY == "object_single_var"

    def test_list_result_wrapped(self):
        """sequence도 mapping이 아니므로 감싼다."""
        class Numbers:
            def json_serialize(self):
                return [1, 2, 3]

        assert normalize_input(Numbers()) == {"object_single_var": [1, 2, 3]}

    def test_takes_precedence_over_to_dict(self):
        assert normalize_input(Both()) == {"via": "json_serialize"}


# =============================================================================
# SimpleNamespace
# =============================================================================


class TestNamespaceInput:
    """SimpleNamespace (stdClass 대응)."""

    def test_public_fields(self):
        data = SimpleNamespace(message="hi", n=[1, 3, 5])

        assert normalize_input(data) == {"message": "hi", "n": [1, 3, 5]}

    def test_private_fields_skipped(self):
        data = SimpleNamespace(message="hi", _secret="x")

        assert normalize_input(data) == {"message": "hi"}

    def test_empty_namespace(self):
        assert normalize_input(SimpleNamespace()) == {}


# =============================================================================
# Mappable (to_dict)
# =============================================================================


class TestMappableInput:
    """to_dict() 객체."""

    def test_dataclass_to_dict(self):
        data = MessageSchema(message="Hello world!", luckyNumbers=[1, 3, 5, 7, 9])

        assert normalize_input(data) == {
            "message": "Hello world!",
            "luckyNumbers": [1, 3, 5, 7, 9],
        }

    def test_non_mapping_result_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_input(BrokenToDict())

        assert exc_info.value.code == ErrorCodes.INVALID_TO_DICT_RESULT
        assert str(exc_info.value) == (
            "set_vars() method expects the passed object.to_dict() "
            "to return a mapping."
        )


# =============================================================================
# Rejected Inputs
# =============================================================================


class TestRejectedInput:
    """지원하지 않는 입력."""

    def test_unsupported_object(self):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_input(Plain())

        message = str(exc_info.value)
        assert exc_info.value.code == ErrorCodes.UNSUPPORTED_OBJECT
        assert "JsonSerializable" in message
        assert "to_dict()" in message
        assert "SimpleNamespace" in message
        assert exc_info.value.context["provided"] == "Plain"

    @pytest.mark.parametrize(
        "value, type_name",
        [
            ([1, 2], "list"),
            ("text", "str"),
            (42, "int"),
            (None, "NoneType"),
            ((1,), "tuple"),
        ],
    )
    def test_non_object_values(self, value, type_name):
        with pytest.raises(InvalidInputError) as exc_info:
            normalize_input(value)

        assert exc_info.value.code == ErrorCodes.INVALID_SOURCE_TYPE
        assert str(exc_info.value) == (
            f"set_vars() method expects mapping or object. {type_name} was provided."
        )

    def test_error_is_value_error(self):
        """InvalidInputError는 ValueError로도 잡힌다."""
        with pytest.raises(ValueError):
            normalize_input(Plain())
