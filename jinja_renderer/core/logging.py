"""
Render logging: render log schema, warnings

규칙:
- 정의되지 않은 변수 접근은 실패가 아니라 경고
- 경고 필수 컨텍스트: level, code, variable, message
- 호출 위치(filename, lineno)는 best-effort
- RenderLog.warnings는 최근 RENDER_LOG_MAX_WARNINGS개만 유지
"""

import inspect
import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime

from jinja_renderer.domain.constants import RENDER_LOG_MAX_WARNINGS
from jinja_renderer.domain.schemas import RenderLog, WarningLog

logger = logging.getLogger(__name__)

WarningListener = Callable[[WarningLog], None]


# =============================================================================
# Render Log Management
# =============================================================================


def create_render_log() -> RenderLog:
    """새 RenderLog 생성."""
    return RenderLog(created_at=datetime.now(UTC).isoformat())


def emit_warning(
    render_log: RenderLog,
    code: str,
    variable: str,
    message: str,
    filename: str | None = None,
    lineno: int | None = None,
    listeners: Iterable[WarningListener] = (),
    max_warnings: int = RENDER_LOG_MAX_WARNINGS,
) -> WarningLog:
    """
    경고 이벤트 기록.

    RenderLog에 추가하고, 표준 logging으로도 남기고, 등록된 listener에 전달.
    RenderLog에는 최근 max_warnings개만 남기고 오래된 경고부터 버린다.

    Args:
        render_log: RenderLog 인스턴스
        code: 경고 코드 (예: UNDEFINED_VARIABLE)
        variable: 관련 변수 이름
        message: 경고 메시지
        filename: 호출 파일 (알 수 있을 때)
        lineno: 호출 라인 (알 수 있을 때)
        listeners: 경고를 받을 콜백들
        max_warnings: RenderLog에 보관할 최대 경고 수

    Returns:
        기록된 WarningLog
    """
    warning = WarningLog(
        level="warning",
        code=code,
        variable=variable,
        message=message,
        filename=filename,
        lineno=lineno,
    )
    render_log.warnings.append(warning)
    if len(render_log.warnings) > max_warnings:
        del render_log.warnings[:-max_warnings]

    logger.warning(
        message,
        extra={
            "code": code,
            "variable": variable,
            "caller_filename": filename,
            "caller_lineno": lineno,
        },
    )

    for listener in listeners:
        listener(warning)

    return warning


def caller_location(depth: int = 2) -> tuple[str | None, int | None]:
    """
    호출 위치 조회.

    Args:
        depth: 이 함수 기준 몇 단계 위 프레임인지
            (1 = 이 함수를 부른 곳, 2 = 그 호출자)

    Returns:
        (filename, lineno). 프레임 정보를 얻을 수 없으면 (None, None)
    """
    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is None:
            return None, None
        return frame.f_code.co_filename, frame.f_lineno
    finally:
        del frame
