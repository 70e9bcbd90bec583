"""
Sheet Layout Engine: 레코드 목록 → 워크시트 행/셀/병합.

행 구성:
1. 헤더 행 (컬럼 label, 헤더 스타일, 컬럼 너비)
2. 레코드마다 (입력 순서 그대로, 재정렬 없음)
   - 그룹 키가 있고 복합 그룹 값이 직전과 다르면 → 소그룹 행
     (첫 셀에 그룹 값, 1..N 컬럼 병합, 병합 영역 네 변 테두리)
   - 데이터 행 (컬럼당 셀 하나, 값 없으면 빈 셀)

행 번호는 항상 "마지막 사용 행 + 1" → 기존 내용이 있는 시트에도 덧붙인다.
필드 읽기 실패는 해당 셀만 빈 셀로 처리하고 계속 진행.
값은 항상 문자열 셀로 기록한다 ("=..."도 수식이 아님). 쓸 수 없는 제어 문자가
있는 값도 빈 셀 + 경고.
"""

import logging
from collections.abc import Sequence
from typing import Any

from openpyxl.cell.cell import Cell
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError
from openpyxl.worksheet.worksheet import Worksheet

from src.core.logging import emit_warning
from src.core.records import FieldRead, join_group_value, read_field, read_group_fields
from src.domain.constants import BORDER_THIN, WIDTH_UNIT_FACTOR
from src.domain.errors import ErrorCodes
from src.domain.schemas import CellStyle, ColumnLayout, ColumnSpec, ExportLog, StyleSet
from src.render.styles import apply_style, outline_region, resolve_styles

logger = logging.getLogger(__name__)

# 어떤 실제 그룹 값(str)과도 같지 않은 초기값
_UNSET = object()


def next_row_index(ws: Worksheet) -> int:
    """
    다음에 쓸 행 번호 (1부터).

    빈 시트면 1, 아니면 마지막 사용 행 + 1.
    """
    if ws.max_row == 1 and ws.max_column == 1:
        # ws["A1"]은 없는 셀을 새로 만든다
        a1 = ws._cells.get((1, 1))
        if a1 is None or a1.value is None:
            return 1
    return ws.max_row + 1


def write_text(cell: Cell, value: str) -> str | None:
    """
    문자열을 그대로 기록 (수식/에러 코드로 해석하지 않음).

    Returns:
        성공이면 None. XML에 쓸 수 없는 제어 문자가 있으면 실패 사유를
        반환하고 셀은 빈 셀로 남는다.
    """
    try:
        cell.value = value
    except IllegalCharacterError as e:
        return f"{type(e).__name__}: {e}"
    # "=1+1" → 'f', "#N/A" → 'e' 추론을 되돌림
    cell.data_type = "s"
    return None


def render_sheet(
    ws: Worksheet,
    records: Sequence[Any],
    layout: ColumnLayout,
    styles: StyleSet | None = None,
    export_log: ExportLog | None = None,
) -> None:
    """
    레코드 목록을 워크시트에 렌더링.

    Args:
        ws: 대상 워크시트 (기존 행이 있으면 그 아래에 덧붙임)
        records: 같은 타입의 레코드 목록 (정렬은 호출자 책임)
        layout: extract_columns 결과
        styles: 스타일 슬롯 (빈 슬롯은 기본 스타일)
        export_log: 있으면 렌더 통계와 필드 읽기 실패 경고를 기록
    """
    if not records or layout.is_empty:
        logger.debug("Nothing to render: empty records or no export columns")
        return

    resolved = resolve_styles(styles)
    # 컬럼별 데이터 스타일 = 데이터 스타일 복제 + 컬럼 정렬
    column_styles = [resolved.data.with_alignment(c.alignment) for c in layout.columns]

    start_row = next_row_index(ws)
    row = start_row

    _write_header_row(ws, row, layout.columns, resolved.header, export_log)
    row += 1

    last_group_value: object = _UNSET
    sub_group_rows = 0
    group_names = ",".join(gf.name for gf in layout.group_fields)

    for record in records:
        if layout.group_fields:
            reads = read_group_fields(record, layout.group_fields)
            _record_failures(export_log, reads, row)
            current_group_value = join_group_value(reads)

            if current_group_value != last_group_value:
                error = _write_sub_group_row(
                    ws, row, current_group_value, layout.column_count, resolved.sub_group
                )
                _record_failures(export_log, [FieldRead(group_names, error=error)], row)
                row += 1
                sub_group_rows += 1
                last_group_value = current_group_value

        _write_data_row(ws, row, record, layout.columns, column_styles, export_log)
        row += 1

    if export_log is not None:
        export_log.rows_written += row - start_row
        export_log.sub_group_rows += sub_group_rows

    logger.debug(
        f"Rendered {len(records)} records into '{ws.title}' "
        f"(rows {start_row}-{row - 1}, {sub_group_rows} sub-group rows)"
    )


def _write_header_row(
    ws: Worksheet,
    row: int,
    columns: Sequence[ColumnSpec],
    style: CellStyle,
    export_log: ExportLog | None,
) -> None:
    for index, column in enumerate(columns, start=1):
        cell = ws.cell(row=row, column=index)
        error = write_text(cell, column.label)
        apply_style(cell, style)
        _record_failures(export_log, [FieldRead(column.name, error=error)], row)
        ws.column_dimensions[get_column_letter(index)].width = (
            column.width * WIDTH_UNIT_FACTOR
        )


def _write_sub_group_row(
    ws: Worksheet,
    row: int,
    group_value: str,
    column_count: int,
    style: CellStyle,
) -> str | None:
    cell = ws.cell(row=row, column=1)
    error = write_text(cell, group_value)
    apply_style(cell, style)

    # 단일 셀 병합은 만들지 않는다
    if column_count > 1:
        ws.merge_cells(
            start_row=row, start_column=1, end_row=row, end_column=column_count
        )
    outline_region(ws, row, 1, row, column_count, BORDER_THIN)
    return error


def _write_data_row(
    ws: Worksheet,
    row: int,
    record: Any,
    columns: Sequence[ColumnSpec],
    column_styles: Sequence[CellStyle],
    export_log: ExportLog | None,
) -> None:
    for index, (column, style) in enumerate(zip(columns, column_styles), start=1):
        read = read_field(record, column.name)
        cell = ws.cell(row=row, column=index)
        if read.present:
            error = write_text(cell, read.value)
            if error is not None:
                read = FieldRead(column.name, error=error)
        apply_style(cell, style)
        _record_failures(export_log, [read], row)


def _record_failures(
    export_log: ExportLog | None,
    reads: Sequence[FieldRead],
    row: int,
) -> None:
    if export_log is None:
        return
    for read in reads:
        if read.failed:
            emit_warning(
                export_log,
                code=ErrorCodes.FIELD_READ_FAILED,
                field_name=read.name,
                message=read.error or "",
                row=row,
            )
