"""
Data schemas for the renderer.

- Capability protocols: set_vars()가 받아들이는 객체 형태
- Diagnostic records: 정의되지 않은 변수 접근 등 non-fatal 경고
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

# =============================================================================
# Capability Protocols
# =============================================================================

@runtime_checkable
class JsonSerializable(Protocol):
    """JSON 호환 값(mapping, sequence, scalar)으로 직렬화 가능한 객체."""

    def json_serialize(self) -> Any: ...


@runtime_checkable
class Mappable(Protocol):
    """to_dict()로 mapping을 돌려주는 객체 (dataclass 스키마 관례)."""

    def to_dict(self) -> Mapping[str, Any]: ...


@runtime_checkable
class WritableBody(Protocol):
    """텍스트를 이어 쓸 수 있는 응답 객체."""

    def write(self, text: str) -> Any: ...


# =============================================================================
# Diagnostic Schemas
# =============================================================================

@dataclass
class WarningLog:
    """
    경고 로그.

    경고 필수 컨텍스트: level, code, variable, message
    호출 위치(filename, lineno)는 알 수 있을 때만 기록.
    """
    level: str = "warning"
    code: str = ""
    variable: str = ""
    message: str = ""
    filename: str | None = None
    lineno: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "code": self.code,
            "variable": self.variable,
            "message": self.message,
            "filename": self.filename,
            "lineno": self.lineno,
        }


@dataclass
class RenderLog:
    """
    렌더러 단위 진단 로그.

    렌더러 인스턴스와 생명주기를 같이 함 (영속화 없음).
    warnings는 최근 RENDER_LOG_MAX_WARNINGS개까지만 보관.
    """
    created_at: str  # ISO 8601
    warnings: list[WarningLog] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "created_at": self.created_at,
            "warnings": [w.to_dict() for w in self.warnings],
        }
