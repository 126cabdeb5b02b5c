"""
Core layer: 변수 정규화, 템플릿 경로, 진단 로그.
"""

from .logging import caller_location, create_render_log, emit_warning
from .normalize import normalize_input
from .paths import append_extension_if_needed, get_extension

__all__ = [
    # normalize
    "normalize_input",
    # paths
    "append_extension_if_needed",
    "get_extension",
    # logging
    "create_render_log",
    "emit_warning",
    "caller_location",
]
