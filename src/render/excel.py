"""
Excel (XLSX) exporter: openpyxl 기반.

- 새 워크북 + 시트 하나 생성 후 render_sheet
- 파일 저장은 원자적 (temp → rename)
- bytes 반환도 지원 (HTTP 응답 등)
- 빈 export(레코드/컬럼 없음)는 헤더 없는 빈 시트
"""

import logging
from collections.abc import Sequence
from io import BytesIO
from pathlib import Path
from typing import Any

from openpyxl import Workbook

from src.core.catalog import layout_for_records
from src.core.files import atomic_write_bytes
from src.core.logging import complete_export_log, create_export_log
from src.domain.constants import DEFAULT_SHEET_TITLE
from src.domain.errors import ErrorCodes, ExportError
from src.domain.schemas import ExportLog, StyleSet
from src.render.sheet import render_sheet

logger = logging.getLogger(__name__)


class ExcelExporter:
    """
    레코드 목록 → XLSX 워크북.

    Usage:
        exporter = ExcelExporter()                       # dataclass 레코드
        exporter = ExcelExporter(columns=column_table)   # dict 레코드
        exporter.export(records, output_path)
    """

    def __init__(
        self,
        columns: Any = None,
        styles: StyleSet | None = None,
        sheet_title: str = DEFAULT_SHEET_TITLE,
    ):
        """
        Args:
            columns: 컬럼 테이블 / dataclass 타입 / ColumnLayout.
                None이면 첫 레코드 타입의 field metadata 사용
            styles: 스타일 슬롯 (None 슬롯은 기본 스타일)
            sheet_title: 시트 이름
        """
        self.columns = columns
        self.styles = styles
        self.sheet_title = sheet_title
        self.last_log: ExportLog | None = None

    def build_workbook(self, records: Sequence[Any]) -> Workbook:
        """
        새 워크북에 렌더링.

        Raises:
            ExportError: HETEROGENEOUS_RECORDS, INVALID_COLUMN_SPEC
        """
        export_log = create_export_log()
        self.last_log = export_log

        try:
            layout = layout_for_records(records, self.columns)

            wb = Workbook()
            ws = wb.active
            ws.title = self.sheet_title

            render_sheet(ws, records, layout, self.styles, export_log)

        except ExportError as e:
            complete_export_log(
                export_log, success=False, error_code=e.code, error_context=e.context
            )
            raise

        complete_export_log(export_log, success=True)
        if export_log.warnings:
            logger.warning(
                f"Export {export_log.run_id}: {len(export_log.warnings)} cells "
                f"left blank after field read failures"
            )
        return wb

    def export_bytes(self, records: Sequence[Any]) -> bytes:
        """XLSX 파일 내용 반환."""
        wb = self.build_workbook(records)
        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    def export(self, records: Sequence[Any], output_path: Path) -> Path:
        """
        XLSX 파일 저장.

        Returns:
            저장된 파일 경로

        Raises:
            ExportError: EXPORT_WRITE_FAILED (그 외 ExportError는 그대로 전파)
        """
        content = self.export_bytes(records)

        try:
            atomic_write_bytes(output_path, content)
        except OSError as e:
            if self.last_log is not None:
                complete_export_log(
                    self.last_log,
                    success=False,
                    error_code=ErrorCodes.EXPORT_WRITE_FAILED,
                    error_context={"path": str(output_path), "error": str(e)},
                )
            raise ExportError(
                ErrorCodes.EXPORT_WRITE_FAILED,
                path=str(output_path),
                error=str(e),
            ) from e

        logger.info(f"Exported {len(records)} records to {output_path}")
        return output_path


def export_to_xlsx(
    records: Sequence[Any],
    output_path: Path,
    columns: Any = None,
    styles: StyleSet | None = None,
    sheet_title: str = DEFAULT_SHEET_TITLE,
) -> Path:
    """
    XLSX export (간편 함수).

    Args:
        records: 레코드 목록
        output_path: 출력 파일 경로
        columns: 컬럼 테이블 (dataclass 레코드면 생략 가능)
        styles: 스타일 슬롯
        sheet_title: 시트 이름

    Returns:
        저장된 파일 경로
    """
    exporter = ExcelExporter(columns=columns, styles=styles, sheet_title=sheet_title)
    return exporter.export(records, output_path)
