"""
HTTP 응답 body 쓰기.

지원 형태:
- fastapi.responses.Response (Starlette Response 및 하위 클래스): body에 이어 붙이고
  content-length 갱신
- WritableBody: write(text) 호출

StreamingResponse, FileResponse는 body가 없으므로 지원하지 않는다.
"""

from typing import Any

from fastapi.responses import FileResponse, Response, StreamingResponse

from jinja_renderer.domain.constants import DEFAULT_CHARSET
from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError
from jinja_renderer.domain.schemas import WritableBody

# body 버퍼 없이 전송되는 응답 타입
UNBUFFERED_RESPONSE_TYPES: tuple[type, ...] = (StreamingResponse, FileResponse)


def is_response(obj: Any) -> bool:
    """응답 객체로 쓸 수 있는지 여부."""
    if isinstance(obj, UNBUFFERED_RESPONSE_TYPES):
        return False
    return isinstance(obj, (Response, WritableBody))


def ensure_writable(response: Any) -> None:
    """
    body를 쓸 수 있는 응답인지 확인.

    Raises:
        InvalidInputError: UNSUPPORTED_RESPONSE (StreamingResponse, FileResponse)
    """
    if isinstance(response, UNBUFFERED_RESPONSE_TYPES):
        raise InvalidInputError(
            ErrorCodes.UNSUPPORTED_RESPONSE,
            "render_to_response() method expects a response with a writable body. "
            f"{type(response).__name__} was provided.",
            provided=type(response).__name__,
        )


def write_body(response: Any, text: str) -> Any:
    """
    응답 body에 텍스트 추가.

    Args:
        response: fastapi Response 또는 WritableBody
        text: 추가할 텍스트

    Returns:
        응답 객체 (write()가 새 응답을 돌려주면 그 응답)

    Raises:
        InvalidInputError: UNSUPPORTED_RESPONSE (StreamingResponse, FileResponse)
    """
    ensure_writable(response)

    if isinstance(response, Response):
        charset = getattr(response, "charset", None) or DEFAULT_CHARSET
        response.body = bytes(response.body or b"") + text.encode(charset)
        response.headers["content-length"] = str(len(response.body))
        return response

    result = response.write(text)
    return result if is_response(result) else response
