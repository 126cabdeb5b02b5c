"""
Pytest fixtures for the renderer tests.
"""

from pathlib import Path

import pytest

from jinja_renderer.render import JinjaEngine, JinjaRenderer, create_engine

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def tests_root() -> Path:
    """tests/ 경로."""
    return Path(__file__).parent


@pytest.fixture
def templates_dir(tests_root: Path) -> Path:
    """테스트용 템플릿 디렉터리."""
    return tests_root / "templates"


@pytest.fixture
def golden_dir(tests_root: Path) -> Path:
    """골든 파일 디렉터리."""
    return tests_root / "golden"


# =============================================================================
# Renderer Fixtures
# =============================================================================

@pytest.fixture
def engine(templates_dir: Path, tmp_path: Path) -> JinjaEngine:
    """파일 로더 + bytecode cache + auto reload 엔진."""
    return create_engine(
        templates_dir,
        cache_dir=tmp_path / "var" / "templates",
        auto_reload=True,
    )


@pytest.fixture
def renderer(engine: JinjaEngine) -> JinjaRenderer:
    """빈 변수 저장소를 가진 렌더러."""
    return JinjaRenderer(engine)


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def sample_vars() -> dict:
    """정상 케이스 템플릿 변수."""
    return {
        "message": "Hello world!",
        "luckyNumbers": list(range(1, 10, 2)),
    }


@pytest.fixture
def expected_html(golden_dir: Path) -> str:
    """test_template_with_multiple_vars 기대 출력."""
    return (golden_dir / "test_template_with_multiple_vars.expected.html").read_text(
        encoding="utf-8"
    )
