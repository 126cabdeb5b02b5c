"""
템플릿 경로 처리.

확장자 판별은 마지막 경로 세그먼트에서만 한다:
- "template"               → "template.jinja"
- "template.html"          → 그대로
- "dir.with.dots/template" → "dir.with.dots/template.jinja"
"""

from jinja_renderer.domain.constants import PATH_SEPARATORS, TEMPLATE_EXTENSION


def get_extension(template_path: str) -> str:
    """
    마지막 세그먼트의 확장자 (점 포함). 없으면 빈 문자열.

    ".hidden" 처럼 점으로 시작하는 이름은 확장자 없음으로 본다.
    """
    segment = template_path
    for sep in PATH_SEPARATORS:
        segment = segment.rsplit(sep, 1)[-1]

    stem = segment.lstrip(".")
    if "." not in stem:
        return ""

    suffix = stem.rsplit(".", 1)[1]
    return f".{suffix}" if suffix else ""


def append_extension_if_needed(
    template_path: str,
    extension: str = TEMPLATE_EXTENSION,
) -> str:
    """
    확장자가 없으면 기본 확장자 추가.

    Args:
        template_path: 템플릿 이름/경로 (로더 기준 상대 경로)
        extension: 추가할 확장자 (".jinja" 또는 "jinja" 모두 허용)

    Returns:
        확장자가 보장된 경로
    """
    if get_extension(template_path):
        return template_path

    if extension and not extension.startswith("."):
        extension = f".{extension}"

    return template_path + extension
