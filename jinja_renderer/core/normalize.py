"""
입력 정규화: set_vars()에 전달된 값 → 변수 mapping.

우선순위 (먼저 만족하는 규칙 적용):
1. Mapping → 그대로 (얕은 복사)
2. JsonSerializable → json_serialize() 결과가 mapping이면 그대로,
   아니면 {"object_single_var": 결과}
3. SimpleNamespace → public 속성 (밑줄로 시작하지 않는 이름)
4. Mappable → to_dict() 결과 (mapping이 아니면 에러)
5. 그 외 → InvalidInputError

정규화는 변수 저장소를 건드리지 않는다. 실패 시 저장소는 그대로 유지.
"""

import numbers
from collections.abc import Mapping
from types import SimpleNamespace
from typing import Any

from jinja_renderer.domain.constants import OBJECT_SINGLE_VAR_KEY
from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError
from jinja_renderer.domain.schemas import JsonSerializable, Mappable

# "객체가 아닌" 값으로 취급하는 내장 타입
NON_OBJECT_TYPES: tuple[type, ...] = (
    type(None),
    numbers.Number,
    str,
    bytes,
    bytearray,
    list,
    tuple,
    set,
    frozenset,
)


def normalize_input(source: Any) -> dict[str, Any]:
    """
    이종 입력을 변수 mapping으로 변환.

    Args:
        source: mapping 또는 지원 capability를 가진 객체

    Returns:
        새 dict (source와 공유하지 않음)

    Raises:
        InvalidInputError: INVALID_SOURCE_TYPE, UNSUPPORTED_OBJECT,
            INVALID_TO_DICT_RESULT, INVALID_VARIABLE_NAME
    """
    if isinstance(source, Mapping):
        return _ensure_string_keys(source)

    if isinstance(source, NON_OBJECT_TYPES):
        raise InvalidInputError(
            ErrorCodes.INVALID_SOURCE_TYPE,
            "set_vars() method expects mapping or object. "
            f"{type(source).__name__} was provided.",
            provided=type(source).__name__,
        )

    if isinstance(source, JsonSerializable):
        serialized = source.json_serialize()
        if not isinstance(serialized, Mapping):
            return {OBJECT_SINGLE_VAR_KEY: serialized}
        return _ensure_string_keys(serialized)

    if isinstance(source, SimpleNamespace):
        return {
            name: value
            for name, value in vars(source).items()
            if not name.startswith("_")
        }

    if isinstance(source, Mappable):
        result = source.to_dict()
        if not isinstance(result, Mapping):
            raise InvalidInputError(
                ErrorCodes.INVALID_TO_DICT_RESULT,
                "set_vars() method expects the passed object.to_dict() "
                "to return a mapping.",
                provided=type(result).__name__,
            )
        return _ensure_string_keys(result)

    raise InvalidInputError(
        ErrorCodes.UNSUPPORTED_OBJECT,
        "set_vars() method expects the passed object to implement "
        "JsonSerializable protocol (json_serialize()), custom to_dict() "
        "method or simply was a SimpleNamespace object.",
        provided=type(source).__name__,
    )


def _ensure_string_keys(data: Mapping[Any, Any]) -> dict[str, Any]:
    """키가 모두 문자열인지 확인 후 dict로 복사."""
    bad_keys = [key for key in data if not isinstance(key, str)]
    if bad_keys:
        raise InvalidInputError(
            ErrorCodes.INVALID_VARIABLE_NAME,
            "set_vars() method expects variable names to be strings. "
            f"{type(bad_keys[0]).__name__} key was provided.",
            keys=[repr(k) for k in bad_keys],
        )
    return dict(data)
