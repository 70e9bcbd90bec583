"""
셀 스타일: 기본 스타일 팩토리 + openpyxl 스타일 객체 변환.

스타일 해석 순서 (export 호출당 한 번):
1. 호출자가 준 슬롯 → 그대로 사용
2. 없는 슬롯 → 기본 스타일
3. 데이터 셀 → 기본/지정 데이터 스타일 + 컬럼 정렬 덮어쓰기 (셀 단위)
"""

from openpyxl.cell.cell import Cell, MergedCell
from openpyxl.styles import Alignment as XlAlignment
from openpyxl.styles import Border, Font, Side
from openpyxl.worksheet.worksheet import Worksheet

from src.domain.constants import BODY_FONT_SIZE, BORDER_THIN, HEADER_FONT_SIZE
from src.domain.schemas import Alignment, CellStyle, FontSpec, StyleSet

# =============================================================================
# Default Styles
# =============================================================================


def default_header_style() -> CellStyle:
    """헤더: 굵게 12pt, 가로/세로 가운데, 줄바꿈, 네 변 얇은 테두리."""
    return CellStyle(
        font=FontSpec(bold=True, size=HEADER_FONT_SIZE),
        horizontal=Alignment.CENTER,
        vertical="center",
        wrap_text=True,
        border=BORDER_THIN,
    )


def default_sub_group_style() -> CellStyle:
    """소그룹: 굵게 11pt, 가로/세로 가운데, 네 변 얇은 테두리."""
    return CellStyle(
        font=FontSpec(bold=True, size=BODY_FONT_SIZE),
        horizontal=Alignment.CENTER,
        vertical="center",
        border=BORDER_THIN,
    )


def default_data_style() -> CellStyle:
    """데이터 기본: 굵게 11pt, 네 변 얇은 테두리 (정렬은 컬럼별로 덮어씀)."""
    return CellStyle(
        font=FontSpec(bold=True, size=BODY_FONT_SIZE),
        border=BORDER_THIN,
    )


def resolve_styles(styles: StyleSet | None) -> StyleSet:
    """빈 슬롯을 기본 스타일로 채운 StyleSet."""
    styles = styles or StyleSet()
    return StyleSet(
        header=styles.header if styles.header is not None else default_header_style(),
        sub_group=(
            styles.sub_group if styles.sub_group is not None else default_sub_group_style()
        ),
        data=styles.data if styles.data is not None else default_data_style(),
    )


# =============================================================================
# openpyxl Conversion
# =============================================================================


def to_font(spec: FontSpec) -> Font:
    return Font(name=spec.name, size=spec.size, bold=spec.bold)


def to_alignment(style: CellStyle) -> XlAlignment:
    horizontal = style.horizontal.value if style.horizontal is not None else None
    return XlAlignment(
        horizontal=horizontal,
        vertical=style.vertical,
        wrap_text=style.wrap_text or None,
    )


def to_border(style: CellStyle) -> Border:
    if style.border is None:
        return Border()
    side = Side(style=style.border)
    return Border(left=side, right=side, top=side, bottom=side)


def apply_style(cell: Cell | MergedCell, style: CellStyle) -> None:
    """셀에 스타일 값 적용."""
    cell.font = to_font(style.font)
    cell.alignment = to_alignment(style)
    cell.border = to_border(style)


# =============================================================================
# Merged Region Borders
# =============================================================================


def outline_region(
    ws: Worksheet,
    min_row: int,
    min_col: int,
    max_row: int,
    max_col: int,
    border_style: str = BORDER_THIN,
) -> None:
    """
    병합 영역 바깥 네 변에 테두리 적용.

    가장자리 셀마다 해당 변만 덮어쓰고 나머지 변은 유지한다.
    """
    side = Side(style=border_style)
    for row in range(min_row, max_row + 1):
        for col in range(min_col, max_col + 1):
            if min_row < row < max_row and min_col < col < max_col:
                continue
            cell = ws.cell(row=row, column=col)
            current = cell.border
            cell.border = Border(
                left=side if col == min_col else current.left,
                right=side if col == max_col else current.right,
                top=side if row == min_row else current.top,
                bottom=side if row == max_row else current.bottom,
            )
