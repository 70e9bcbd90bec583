"""
Core layer: 메타데이터 카탈로그, 레코드 읽기, 설정, 실행 로그.

역할:
- 레코드 타입 → ColumnLayout (컬럼/그룹 키 분리)
- 레코드 필드 값 읽기 (실패 시 빈 값)
- 원자적 파일 쓰기, run log
"""

from .catalog import (
    column_table_from_config,
    extract_columns,
    layout_for_records,
    load_column_table,
)
from .config import ExportSettings, load_config
from .files import atomic_write_bytes, atomic_write_json
from .ids import generate_run_id, sanitize_filename
from .logging import (
    complete_export_log,
    create_export_log,
    emit_warning,
    save_export_log,
)
from .records import FieldRead, group_value, read_field

__all__ = [
    # catalog
    "extract_columns",
    "layout_for_records",
    "column_table_from_config",
    "load_column_table",
    # config
    "ExportSettings",
    "load_config",
    # files
    "atomic_write_bytes",
    "atomic_write_json",
    # ids
    "generate_run_id",
    "sanitize_filename",
    # logging
    "create_export_log",
    "emit_warning",
    "complete_export_log",
    "save_export_log",
    # records
    "FieldRead",
    "read_field",
    "group_value",
]
