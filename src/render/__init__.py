"""
Render layer: XLSX 출력 생성.

역할:
- ColumnLayout + 레코드 → 워크시트 (헤더, 소그룹, 데이터 행)
- 워크북 생성/저장 (openpyxl)
"""

from .excel import ExcelExporter, export_to_xlsx
from .sheet import render_sheet
from .styles import (
    default_data_style,
    default_header_style,
    default_sub_group_style,
    resolve_styles,
)

__all__ = [
    "export_to_xlsx",
    "render_sheet",
    "ExcelExporter",
    "default_data_style",
    "default_header_style",
    "default_sub_group_style",
    "resolve_styles",
]
