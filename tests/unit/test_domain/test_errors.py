"""
test_errors.py - 에러 정의 테스트
"""

from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError, RendererError


class TestInvalidInputError:
    def test_message_is_plain(self):
        """str(error)는 메시지 그대로 (코드 접두어 없음)."""
        error = InvalidInputError(ErrorCodes.MISSING_ARGUMENTS, "at least 1 argument")

        assert str(error) == "at least 1 argument"
        assert error.code == "MISSING_ARGUMENTS"

    def test_hierarchy(self):
        error = InvalidInputError("CODE", "msg")

        assert isinstance(error, RendererError)
        assert isinstance(error, ValueError)

    def test_to_dict_includes_context(self):
        error = InvalidInputError("CODE", "msg", provided="list")

        assert error.to_dict() == {
            "code": "CODE",
            "message": "msg",
            "provided": "list",
        }
