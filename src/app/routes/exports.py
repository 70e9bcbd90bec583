"""
Export Routes: 레코드 → XLSX 다운로드.

- POST /api/exports/xlsx → 컬럼 테이블 + 레코드(JSON) → XLSX 파일
- 컬럼 정의 오류 → 422 (ExportError.to_dict())
- 빈 레코드 → 빈 시트 (에러 아님)
"""

import logging
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response
from pydantic import BaseModel, Field

from src.core.catalog import column_table_from_config
from src.core.config import ExportSettings
from src.core.ids import sanitize_filename
from src.core.logging import save_export_log
from src.domain.constants import DEFAULT_EXPORT_FILENAME, XLSX_MIME_TYPE
from src.domain.errors import ExportError
from src.render.excel import ExcelExporter

logger = logging.getLogger(__name__)

api_router = APIRouter()


# =============================================================================
# Request Models
# =============================================================================


class ColumnEntry(BaseModel):
    """컬럼 테이블 항목 (YAML 컬럼 테이블과 같은 키)."""
    name: str
    label: str
    order: int = 0
    width: int = 20
    align: str = "left"
    sub_group: bool = False


class ExportRequest(BaseModel):
    """XLSX export 요청."""
    columns: list[ColumnEntry]
    records: list[dict[str, Any]] = Field(default_factory=list)
    sheet_title: str | None = None
    filename: str | None = None


# =============================================================================
# API Routes
# =============================================================================


@api_router.post("/xlsx")
async def export_xlsx(request: Request, payload: ExportRequest) -> Response:
    """
    레코드 목록을 XLSX로 렌더링해서 바로 반환.

    레코드 순서는 그대로 유지된다 (정렬은 호출자 책임).
    """
    settings: ExportSettings = request.app.state.export_settings

    try:
        columns = column_table_from_config(
            {"columns": [c.model_dump() for c in payload.columns]}
        )
        exporter = ExcelExporter(
            columns=columns,
            sheet_title=payload.sheet_title or settings.sheet_title,
        )
        content = exporter.export_bytes(payload.records)
    except ExportError as e:
        logger.warning(f"Export rejected: {e}")
        raise HTTPException(status_code=422, detail=e.to_dict()) from e

    if settings.save_run_logs and exporter.last_log is not None:
        save_export_log(exporter.last_log, Path(settings.logs_dir))

    filename = sanitize_filename(payload.filename or DEFAULT_EXPORT_FILENAME)
    return Response(
        content=content,
        media_type=XLSX_MIME_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
