"""
Field Metadata Catalog: 레코드 타입의 export 메타데이터 추출.

입력 (선언 순서가 보장되는 것만):
1. dataclass 타입/인스턴스: field(metadata={"export": ExportField(...)})
2. 컬럼 테이블: [(name, ExportField), ...] 또는 {name: ExportField}
3. YAML 컬럼 테이블 (load_column_table)

출력: ColumnLayout
- sub_group=True → group_fields (선언 순서, order 무시)
- 나머지 → columns (order 오름차순, 동일 order는 선언 순서 유지)
- 메타데이터 없는 필드는 완전히 제외
- columns가 비면 is_empty → 호출자는 no-op 처리

캐시 없음: export 호출마다 다시 계산.
"""

import dataclasses
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_COLUMN_ORDER,
    DEFAULT_COLUMN_WIDTH,
    EXPORT_METADATA_KEY,
)
from src.domain.errors import ErrorCodes, ExportError
from src.domain.schemas import (
    Alignment,
    ColumnLayout,
    ColumnSpec,
    ExportField,
    GroupKeyField,
)

# (field name, metadata or None)
DeclaredField = tuple[str, ExportField | None]


# =============================================================================
# Extraction
# =============================================================================


def extract_columns(source: Any) -> ColumnLayout:
    """
    컬럼/그룹 키 필드 분리.

    Args:
        source: dataclass 타입/인스턴스, 컬럼 테이블, 또는 ColumnLayout

    Returns:
        ColumnLayout

    Raises:
        ExportError: INVALID_COLUMN_SPEC
    """
    if isinstance(source, ColumnLayout):
        return source

    columns: list[ColumnSpec] = []
    group_fields: list[GroupKeyField] = []

    for name, meta in _declared_fields(source):
        if meta is None:
            continue
        if meta.sub_group:
            group_fields.append(GroupKeyField(name=name, label=meta.label))
        else:
            columns.append(ColumnSpec.from_export_field(name, meta))

    # list.sort는 안정 정렬 → 동일 order는 선언 순서 유지
    columns.sort(key=lambda c: c.order)

    return ColumnLayout(columns=tuple(columns), group_fields=tuple(group_fields))


def _declared_fields(source: Any) -> list[DeclaredField]:
    """선언 순서대로 (name, ExportField | None) 목록."""
    if dataclasses.is_dataclass(source):
        declared = [
            (f.name, f.metadata.get(EXPORT_METADATA_KEY))
            for f in dataclasses.fields(source)
        ]
    elif isinstance(source, Mapping):
        declared = list(source.items())
    elif isinstance(source, Sequence) and not isinstance(source, (str, bytes)):
        declared = []
        for entry in source:
            if not isinstance(entry, Sequence) or len(entry) != 2:
                raise ExportError(
                    ErrorCodes.INVALID_COLUMN_SPEC,
                    reason="column table entries must be (name, ExportField) pairs",
                    entry=repr(entry),
                )
            declared.append((entry[0], entry[1]))
    else:
        raise ExportError(
            ErrorCodes.INVALID_COLUMN_SPEC,
            reason="unsupported column source",
            source_type=type(source).__name__,
        )

    _validate_declared(declared)
    return declared


def _validate_declared(declared: list[DeclaredField]) -> None:
    seen: set[str] = set()
    for name, meta in declared:
        if not isinstance(name, str) or not name:
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="field name must be a non-empty string",
                field=repr(name),
            )
        if name in seen:
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="duplicate field name",
                field=name,
            )
        seen.add(name)
        if meta is not None and not isinstance(meta, ExportField):
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="export metadata must be an ExportField",
                field=name,
                metadata_type=type(meta).__name__,
            )


def layout_for_records(records: Sequence[Any], columns: Any = None) -> ColumnLayout:
    """
    레코드 목록에 대한 ColumnLayout.

    columns가 없으면 첫 번째 레코드의 타입을 대표로 사용.
    한 호출 안의 레코드 타입은 모두 같아야 한다 (전제조건).

    Raises:
        ExportError: HETEROGENEOUS_RECORDS, INVALID_COLUMN_SPEC
    """
    if not records:
        return extract_columns(columns) if columns is not None else ColumnLayout()

    first_type = type(records[0])
    for index, record in enumerate(records):
        if type(record) is not first_type:
            raise ExportError(
                ErrorCodes.HETEROGENEOUS_RECORDS,
                expected=first_type.__name__,
                actual=type(record).__name__,
                index=index,
            )

    if columns is not None:
        return extract_columns(columns)

    if not dataclasses.is_dataclass(records[0]):
        raise ExportError(
            ErrorCodes.INVALID_COLUMN_SPEC,
            reason="records without field metadata need an explicit column table",
            record_type=first_type.__name__,
        )
    return extract_columns(first_type)


# =============================================================================
# YAML Column Tables
# =============================================================================


def column_table_from_config(config: Mapping[str, Any]) -> list[DeclaredField]:
    """
    설정 dict → 컬럼 테이블.

    형식:
        columns:
          - name: order_no
            label: 주문번호
            order: 1
            width: 20
            align: center
          - name: order_country
            label: 국가
            sub_group: true

    Raises:
        ExportError: INVALID_COLUMN_SPEC
    """
    entries = config.get("columns")
    if not isinstance(entries, list):
        raise ExportError(
            ErrorCodes.INVALID_COLUMN_SPEC,
            reason="'columns' must be a list",
        )

    table: list[DeclaredField] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, Mapping):
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="column entry must be a mapping",
                index=index,
            )
        name = entry.get("name")
        if not name:
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="column entry requires 'name'",
                index=index,
            )
        order = entry.get("order", DEFAULT_COLUMN_ORDER)
        if isinstance(order, bool) or not isinstance(order, int):
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason=f"order must be an integer, got {order!r}",
                field=name,
            )
        meta = ExportField(
            label=entry.get("label", ""),
            order=order,
            width=entry.get("width", DEFAULT_COLUMN_WIDTH),
            align=entry.get("align", Alignment.LEFT),
            sub_group=bool(entry.get("sub_group", False)),
        )
        table.append((str(name), meta))

    _validate_declared(table)
    return table


def load_column_table(path: Path) -> list[DeclaredField]:
    """
    YAML 컬럼 테이블 로드.

    Raises:
        ExportError: CONFIG_NOT_FOUND, INVALID_COLUMN_SPEC
    """
    if not path.exists():
        raise ExportError(ErrorCodes.CONFIG_NOT_FOUND, path=str(path))

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return column_table_from_config(data)
