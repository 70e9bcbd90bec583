"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.app.routes import exports
from src.core.config import ExportSettings, load_config

# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드
    """
    app.state.config = load_config()
    app.state.export_settings = ExportSettings.from_config(app.state.config)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Grouped XLSX Export",
    description="레코드 목록 → 소그룹 병합 행이 있는 XLSX",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(exports.api_router, prefix="/api/exports", tags=["Exports API"])


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """엔드포인트 목록."""
    return {
        "message": "Grouped XLSX Export",
        "endpoints": {
            "export_xlsx": "/api/exports/xlsx",
            "health": "/health",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
