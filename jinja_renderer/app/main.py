"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uvicorn jinja_renderer.app.main:app --reload
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse

from jinja_renderer.config import load_renderer_config
from jinja_renderer.render import JinjaEngine, JinjaRenderer

# =============================================================================
# Dependencies
# =============================================================================


def get_renderer(request: Request) -> JinjaRenderer:
    """
    요청마다 새 렌더러 생성.

    엔진(컴파일/캐시)은 앱 단위로 공유, 변수 저장소는 요청 단위.
    """
    return JinjaRenderer(
        request.app.state.engine,
        extension=request.app.state.renderer_config.extension,
    )


# =============================================================================
# App Factory
# =============================================================================


def create_app(config_path: Path | None = None) -> FastAPI:
    """
    FastAPI 앱 생성.

    Args:
        config_path: 설정 파일 경로 (기본: 프로젝트 루트 default.yaml)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        # Startup
        config = load_renderer_config(config_path)
        app.state.renderer_config = config
        app.state.engine = JinjaEngine.from_config(config)

        yield

    app = FastAPI(
        title="Jinja Template Renderer",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.get("/", response_class=HTMLResponse)
    async def index(
        renderer: JinjaRenderer = Depends(get_renderer),
    ) -> HTMLResponse:
        """홈 페이지."""
        renderer.set_var("title", "Jinja Template Renderer")
        return renderer.render(
            HTMLResponse(),
            "index",
            {"message": "Hello world!"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "jinja_renderer.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
