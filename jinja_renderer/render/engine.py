"""
Template engine: Jinja2 Environment 래퍼.

역할:
- 템플릿 로드/컴파일/캐시/auto-reload는 전부 Jinja2에 위임
- 엔진 에러(TemplateNotFound, TemplateSyntaxError 등)는 그대로 전파
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

from jinja2 import (
    Environment,
    FileSystemBytecodeCache,
    FileSystemLoader,
)

from jinja_renderer.config import RendererConfig

logger = logging.getLogger(__name__)


class TemplateEngine(Protocol):
    """경로 + 변수 mapping → 렌더된 문자열."""

    def render_to_string(self, path: str, variables: Mapping[str, Any]) -> str: ...


class JinjaEngine:
    """
    Jinja2 기반 템플릿 엔진.

    Usage:
        engine = create_engine(Path("templates"), cache_dir=Path("var/templates"))
        html = engine.render_to_string("page.jinja", {"message": "hi"})
    """

    def __init__(self, environment: Environment):
        self.environment = environment

    @classmethod
    def from_config(cls, config: RendererConfig) -> "JinjaEngine":
        return create_engine(
            config.templates_dir,
            cache_dir=config.cache_dir,
            auto_reload=config.auto_reload,
            autoescape=config.autoescape,
        )

    def render_to_string(self, path: str, variables: Mapping[str, Any]) -> str:
        """
        템플릿 렌더링.

        Args:
            path: 로더 기준 템플릿 경로 (확장자 포함)
            variables: 템플릿 변수

        Returns:
            렌더된 텍스트

        Raises:
            jinja2.TemplateNotFound, jinja2.TemplateSyntaxError 등 엔진 에러
        """
        template = self.environment.get_template(path)
        return template.render(variables)


def create_engine(
    templates_dir: Path,
    cache_dir: Path | None = None,
    auto_reload: bool = True,
    autoescape: bool = True,
    **options: Any,
) -> JinjaEngine:
    """
    파일 시스템 기반 JinjaEngine 생성.

    Args:
        templates_dir: 템플릿 루트 디렉터리
        cache_dir: 컴파일된 bytecode 저장 디렉터리 (None이면 메모리 캐시만)
        auto_reload: 템플릿 파일 변경 시 재컴파일
        autoescape: 출력 자동 HTML escape
        **options: Environment에 그대로 전달할 추가 옵션

    Returns:
        JinjaEngine 인스턴스
    """
    bytecode_cache = None
    if cache_dir is not None:
        cache_dir.mkdir(parents=True, exist_ok=True)
        bytecode_cache = FileSystemBytecodeCache(str(cache_dir))

    # 템플릿 원문과 byte 단위로 같은 출력을 위해 마지막 개행 유지
    options.setdefault("keep_trailing_newline", True)

    environment = Environment(
        loader=FileSystemLoader(str(templates_dir)),
        bytecode_cache=bytecode_cache,
        auto_reload=auto_reload,
        autoescape=autoescape,
        **options,
    )

    logger.debug(
        f"Jinja environment created: templates={templates_dir}, "
        f"cache={cache_dir}, auto_reload={auto_reload}"
    )
    return JinjaEngine(environment)
