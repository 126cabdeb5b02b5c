"""
Jinja 렌더러: 변수 저장소 + 입력 정규화 + 렌더링 위임.

역할:
- 변수 저장소 소유 (get/set/has/remove, dict 스타일 접근)
- set_vars(): mapping/객체 → 변수 병합 (core/normalize.py 규칙)
- 렌더링은 TemplateEngine, 응답 쓰기는 render/response.py에 위임

주의:
- 저장소는 인스턴스 전용. 여러 요청/스레드에서 공유하지 말 것
  (동기화 없음, FastAPI 연동은 요청마다 새 렌더러 생성)
"""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from jinja_renderer.core.logging import (
    caller_location,
    create_render_log,
    emit_warning,
)
from jinja_renderer.core.normalize import normalize_input
from jinja_renderer.core.paths import append_extension_if_needed
from jinja_renderer.domain.constants import TEMPLATE_EXTENSION
from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError
from jinja_renderer.domain.schemas import WarningLog
from jinja_renderer.render.base import TemplateRenderer
from jinja_renderer.render.engine import TemplateEngine
from jinja_renderer.render.response import ensure_writable, is_response, write_body

logger = logging.getLogger(__name__)


class JinjaRenderer(TemplateRenderer):
    """
    Jinja 기반 TemplateRenderer 구현.

    Usage:
        renderer = JinjaRenderer(create_engine(Path("templates")))
        renderer.set_var("message", "Hello world!")
        html = renderer.render_to_string("page", {"luckyNumbers": [1, 3, 5]})

        # 응답에 쓰기
        response = renderer.render(HTMLResponse(), "page")
    """

    TEMPLATE_EXTENSION = TEMPLATE_EXTENSION

    def __init__(
        self,
        engine: TemplateEngine,
        extension: str | None = None,
    ):
        """
        Args:
            engine: 템플릿 엔진 (JinjaEngine 등)
            extension: 기본 확장자 (None이면 TEMPLATE_EXTENSION)
        """
        self.engine = engine
        self.extension = extension or self.TEMPLATE_EXTENSION
        self.render_log = create_render_log()
        self._data: dict[str, Any] = {}
        self._listeners: list[Callable[[WarningLog], None]] = []

    # =========================================================================
    # Variable Store
    # =========================================================================

    def get_var(self, name: str) -> Any:
        return self._lookup(name, f"get_var({name})")

    def set_var(self, name: str, value: Any) -> "JinjaRenderer":
        self._data[name] = value
        return self

    def has_var(self, name: str) -> bool:
        return name in self._data

    def remove_var(self, name: str) -> None:
        self._data.pop(name, None)

    def get_vars(self) -> dict[str, Any]:
        return dict(self._data)

    def set_vars(self, data: Any) -> "JinjaRenderer":
        """
        mapping/객체에서 변수 일괄 병합.

        새 키는 추가, 기존 키는 덮어쓰기, 관계없는 키는 유지.

        Args:
            data: Mapping, JsonSerializable, SimpleNamespace, to_dict() 객체

        Raises:
            InvalidInputError: 지원하지 않는 입력 (저장소는 변경되지 않음)
        """
        self._data.update(normalize_input(data))
        return self

    def on_warning(
        self,
        listener: Callable[[WarningLog], None],
    ) -> Callable[[WarningLog], None]:
        """경고 listener 등록. 데코레이터로도 사용 가능."""
        self._listeners.append(listener)
        return listener

    def _lookup(self, name: str, via: str) -> Any:
        if name in self._data:
            return self._data[name]

        # 0: caller_location, 1: _lookup, 2: get_var/__getitem__, 3: 호출자
        filename, lineno = caller_location(depth=3)
        message = f"Undefined variable via {via}"
        if filename is not None:
            message += f" in {filename} on line {lineno}"

        emit_warning(
            self.render_log,
            code=ErrorCodes.UNDEFINED_VARIABLE,
            variable=name,
            message=message,
            filename=filename,
            lineno=lineno,
            listeners=self._listeners,
        )
        return None

    # dict 스타일 접근: renderer["message"], "message" in renderer, ...

    def __getitem__(self, name: str) -> Any:
        return self._lookup(name, f"[{name!r}]")

    def __setitem__(self, name: str, value: Any) -> None:
        self._data[name] = value

    def __delitem__(self, name: str) -> None:
        self._data.pop(name, None)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    # =========================================================================
    # Rendering
    # =========================================================================

    def render_to_string(self, template_path: str, data: Any = None) -> str:
        """
        템플릿 렌더링 → 문자열.

        Args:
            template_path: 템플릿 이름/경로 (확장자 없으면 기본 확장자 추가)
            data: 렌더 전에 병합할 변수 (None이면 병합 없음)

        Returns:
            엔진이 렌더한 텍스트 (그대로)

        Raises:
            InvalidInputError: template_path가 문자열이 아니거나 data가 잘못된 형태
            jinja2 에러: 엔진 에러는 그대로 전파
        """
        if not isinstance(template_path, str):
            raise InvalidInputError(
                ErrorCodes.INVALID_TEMPLATE_NAME,
                "render_to_string() method expects template path to be a string. "
                f"{type(template_path).__name__} was provided.",
                provided=type(template_path).__name__,
            )

        if data is not None:
            self.set_vars(data)

        path = self.append_extension_if_needed(template_path)
        html = self.engine.render_to_string(path, self._data)
        logger.debug(f"Rendered template: {path}")
        return html

    def render_to_response(
        self,
        response: Any,
        template_path: str,
        data: Any = None,
    ) -> Any:
        """
        템플릿 렌더링 → 응답 body에 추가.

        Args:
            response: fastapi Response 또는 write(text)를 가진 객체
            template_path: 템플릿 이름/경로
            data: 렌더 전에 병합할 변수

        Returns:
            body가 채워진 응답

        Raises:
            InvalidInputError: UNSUPPORTED_RESPONSE (body 없는 응답, 렌더 전에 확인)
        """
        ensure_writable(response)
        return write_body(response, self.render_to_string(template_path, data))

    def render(self, *args: Any, **kwargs: Any) -> Any:
        """
        단일 진입점.

        - render(response, "page", data) → render_to_response
        - render(response, template_path="page") → render_to_response
        - render("page", data)           → render_to_string

        Raises:
            InvalidInputError: MISSING_ARGUMENTS (인자 없음)
        """
        count = len(args) + len(kwargs)

        if args and is_response(args[0]) and count >= 2:
            return self.render_to_response(*args, **kwargs)
        if count > 0:
            return self.render_to_string(*args, **kwargs)

        raise InvalidInputError(
            ErrorCodes.MISSING_ARGUMENTS,
            "render() method expects at least 1 argument. 0 arguments provided.",
        )

    def append_extension_if_needed(self, template_path: str) -> str:
        return append_extension_if_needed(template_path, self.extension)
