"""
Domain Constants: export 전역 상수.

컬럼 기본값, 스타일 기본값, 파일명 정책 등.
"""

# =============================================================================
# Column Defaults (컬럼 메타데이터 기본값)
# =============================================================================

DEFAULT_COLUMN_ORDER = 0
DEFAULT_COLUMN_WIDTH = 20

# field(metadata=...)에서 ExportField를 찾는 키
EXPORT_METADATA_KEY = "export"

# =============================================================================
# Width Scaling
# =============================================================================
# openpyxl의 column_dimensions[...].width 는 XLSX <col width>와 같은 "문자 수" 단위.
# 저장 시 단위 변환 없음 → 배율 1

WIDTH_UNIT_FACTOR = 1

# =============================================================================
# Style Defaults
# =============================================================================

HEADER_FONT_SIZE = 12
BODY_FONT_SIZE = 11
BORDER_THIN = "thin"

# 소그룹 행 사이의 구분자
GROUP_VALUE_SEPARATOR = " "

# =============================================================================
# Output
# =============================================================================

DEFAULT_SHEET_TITLE = "Data"
DEFAULT_EXPORT_FILENAME = "export.xlsx"
XLSX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

RUN_ID_PREFIX = "RUN-"
