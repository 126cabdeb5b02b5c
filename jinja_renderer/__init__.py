"""
jinja-template-renderer: Jinja2를 TemplateRenderer 인터페이스에 연결하는 어댑터.
"""

from jinja_renderer.domain.constants import OBJECT_SINGLE_VAR_KEY, TEMPLATE_EXTENSION
from jinja_renderer.domain.errors import ErrorCodes, InvalidInputError, RendererError
from jinja_renderer.render import (
    JinjaEngine,
    JinjaRenderer,
    TemplateRenderer,
    create_engine,
)

__version__ = "0.1.0"

__all__ = [
    "JinjaRenderer",
    "JinjaEngine",
    "TemplateRenderer",
    "create_engine",
    "InvalidInputError",
    "RendererError",
    "ErrorCodes",
    "TEMPLATE_EXTENSION",
    "OBJECT_SINGLE_VAR_KEY",
]
