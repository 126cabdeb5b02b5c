"""
Render layer: 템플릿 + 변수 → 문자열/HTTP 응답.

역할:
- JinjaEngine: Jinja2 Environment 래퍼 (engine.py)
- JinjaRenderer: 변수 저장소 + 렌더링 디스패치 (renderer.py)
- write_body: 응답 body 쓰기 (response.py)
"""

from .base import TemplateRenderer
from .engine import JinjaEngine, TemplateEngine, create_engine
from .renderer import JinjaRenderer
from .response import ensure_writable, is_response, write_body

__all__ = [
    "TemplateRenderer",
    "TemplateEngine",
    "JinjaEngine",
    "JinjaRenderer",
    "create_engine",
    "ensure_writable",
    "is_response",
    "write_body",
]
