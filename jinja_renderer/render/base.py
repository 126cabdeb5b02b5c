"""
Template Renderer 추상 인터페이스.

엔진 교체가 가능하도록 변수 저장소 + 렌더링 계약만 정의.
구현체: render/renderer.py (JinjaRenderer)
"""

from abc import ABC, abstractmethod
from typing import Any


class TemplateRenderer(ABC):
    """
    템플릿 렌더러 인터페이스.

    변수 저장소(get/set/has/remove), bulk 할당(set_vars),
    출력(render_to_string / render_to_response / render)을 제공.
    """

    @abstractmethod
    def get_var(self, name: str) -> Any:
        """변수 조회. 없으면 경고 후 None."""

    @abstractmethod
    def set_var(self, name: str, value: Any) -> "TemplateRenderer":
        """변수 설정 (덮어쓰기). self 반환."""

    @abstractmethod
    def has_var(self, name: str) -> bool:
        """변수 존재 여부."""

    @abstractmethod
    def remove_var(self, name: str) -> None:
        """변수 삭제. 없으면 무시."""

    @abstractmethod
    def get_vars(self) -> dict[str, Any]:
        """현재 변수 전체."""

    @abstractmethod
    def set_vars(self, data: Any) -> "TemplateRenderer":
        """mapping/객체에서 변수 일괄 병합. self 반환."""

    @abstractmethod
    def render_to_string(self, template_path: str, data: Any = None) -> str:
        """템플릿 렌더링 → 문자열."""

    @abstractmethod
    def render_to_response(
        self,
        response: Any,
        template_path: str,
        data: Any = None,
    ) -> Any:
        """템플릿 렌더링 → 응답 body에 쓰기."""

    @abstractmethod
    def render(self, *args: Any, **kwargs: Any) -> Any:
        """인자 형태에 따라 render_to_response 또는 render_to_string."""
