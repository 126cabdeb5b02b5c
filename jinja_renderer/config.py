"""
설정 로드: default.yaml → RendererConfig.

default.yaml 예:
    renderer:
      templates_dir: templates
      cache_dir: var/templates
      auto_reload: true
      autoescape: true
      extension: .jinja
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from jinja_renderer.domain.constants import (
    DEFAULT_CONFIG_FILENAME,
    TEMPLATE_EXTENSION,
)

PROJECT_ROOT = Path(__file__).parent.parent

# 패키지에 포함된 앱 템플릿 (설정 파일 없이 설치된 경우의 기본값)
PACKAGE_TEMPLATES_DIR = Path(__file__).parent / "app" / "templates"


@dataclass
class RendererConfig:
    """렌더러/엔진 설정."""
    templates_dir: Path
    cache_dir: Path | None = None  # None이면 bytecode cache 사용 안 함
    auto_reload: bool = True
    autoescape: bool = True
    extension: str = TEMPLATE_EXTENSION

    @classmethod
    def from_dict(
        cls,
        data: dict[str, Any],
        base_dir: Path | None = None,
    ) -> "RendererConfig":
        """
        dict → RendererConfig.

        Args:
            data: "renderer" 섹션 (또는 전체 설정)
            base_dir: 상대 경로 기준 디렉터리 (기본: 프로젝트 루트)
        """
        if base_dir is None:
            base_dir = PROJECT_ROOT

        section = data.get("renderer", data) or {}

        cache_dir = section.get("cache_dir")
        return cls(
            templates_dir=_resolve(
                base_dir, section.get("templates_dir") or PACKAGE_TEMPLATES_DIR
            ),
            cache_dir=_resolve(base_dir, cache_dir) if cache_dir else None,
            auto_reload=bool(section.get("auto_reload", True)),
            autoescape=bool(section.get("autoescape", True)),
            extension=section.get("extension", TEMPLATE_EXTENSION),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "templates_dir": str(self.templates_dir),
            "cache_dir": str(self.cache_dir) if self.cache_dir else None,
            "auto_reload": self.auto_reload,
            "autoescape": self.autoescape,
            "extension": self.extension,
        }


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드. 파일이 없으면 빈 dict."""
    if config_path is None:
        config_path = PROJECT_ROOT / DEFAULT_CONFIG_FILENAME

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


def load_renderer_config(config_path: Path | None = None) -> RendererConfig:
    """
    RendererConfig 로드.

    상대 경로는 설정 파일이 있는 디렉터리 기준으로 해석.
    """
    if config_path is None:
        config_path = PROJECT_ROOT / DEFAULT_CONFIG_FILENAME

    return RendererConfig.from_dict(
        load_config(config_path),
        base_dir=config_path.parent,
    )


def _resolve(base_dir: Path, value: str | Path) -> Path:
    path = Path(value)
    return path if path.is_absolute() else base_dir / path
