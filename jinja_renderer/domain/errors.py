"""
Error definitions for the renderer.

규칙:
- 조용한 실패 금지 → 잘못된 입력은 InvalidInputError로 명시적 실패
- 메시지는 위반된 기대 조건을 그대로 명시 (호출자가 메시지로 매칭 가능)
- 엔진/응답 객체의 에러는 감싸지 않고 그대로 전파
"""

from typing import Any


class RendererError(Exception):
    """
    렌더러 관련 에러의 기반 클래스.

    Usage:
        raise RendererError("MISSING_ARGUMENTS", "render() method expects ...")
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class InvalidInputError(RendererError, ValueError):
    """
    입력 형태가 계약을 위반한 경우.

    즉시 중단:
    - set_vars()에 지원하지 않는 타입/객체 전달
    - to_dict()가 mapping이 아닌 값 반환
    - render()에 인자 없음
    """


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러/경고 코드 상수."""

    # === set_vars() ===
    INVALID_SOURCE_TYPE = "INVALID_SOURCE_TYPE"
    UNSUPPORTED_OBJECT = "UNSUPPORTED_OBJECT"
    INVALID_TO_DICT_RESULT = "INVALID_TO_DICT_RESULT"
    INVALID_VARIABLE_NAME = "INVALID_VARIABLE_NAME"

    # === render*() ===
    INVALID_TEMPLATE_NAME = "INVALID_TEMPLATE_NAME"
    MISSING_ARGUMENTS = "MISSING_ARGUMENTS"
    UNSUPPORTED_RESPONSE = "UNSUPPORTED_RESPONSE"

    # === Warnings (non-fatal) ===
    UNDEFINED_VARIABLE = "UNDEFINED_VARIABLE"
