"""
Data schemas for the export pipeline.

규칙:
- 컬럼 메타데이터는 선언 후 불변 (frozen dataclass)
- 스타일도 불변 값: "복제 후 정렬 덮어쓰기" = 정렬만 바꾼 새 값 생성
- 한 필드는 컬럼 필드이거나 그룹 키 필드, 둘 중 하나
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from src.domain.constants import (
    BODY_FONT_SIZE,
    DEFAULT_COLUMN_ORDER,
    DEFAULT_COLUMN_WIDTH,
)
from src.domain.errors import ErrorCodes, ExportError

# =============================================================================
# Alignment
# =============================================================================

class Alignment(str, Enum):
    """
    컬럼 가로 정렬.

    값은 openpyxl Alignment.horizontal 값과 동일.
    """
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def parse_alignment(value: Any, field_name: str = "") -> Alignment:
    """
    문자열/Enum → Alignment 변환.

    Raises:
        ExportError: INVALID_COLUMN_SPEC (알 수 없는 정렬)
    """
    if isinstance(value, Alignment):
        return value
    try:
        return Alignment(str(value).strip().lower())
    except ValueError as e:
        raise ExportError(
            ErrorCodes.INVALID_COLUMN_SPEC,
            field=field_name,
            reason=f"unknown alignment: {value!r}",
        ) from e


# =============================================================================
# Column Metadata
# =============================================================================

@dataclass(frozen=True)
class ExportField:
    """
    필드 하나의 export 메타데이터 선언.

    dataclass 필드에 붙여서 사용:
        order_no: str = field(metadata={"export": ExportField("주문번호", order=1)})

    또는 컬럼 테이블에 (name, ExportField) 쌍으로 등록.
    """
    label: str
    order: int = DEFAULT_COLUMN_ORDER
    width: int = DEFAULT_COLUMN_WIDTH
    align: Alignment = Alignment.LEFT
    sub_group: bool = False  # True면 소그룹 행 계산에만 사용 (컬럼 아님)

    def __post_init__(self) -> None:
        if not self.label or not str(self.label).strip():
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                reason="label cannot be empty",
            )
        if isinstance(self.width, bool) or not isinstance(self.width, int) or self.width <= 0:
            raise ExportError(
                ErrorCodes.INVALID_COLUMN_SPEC,
                label=self.label,
                reason=f"width must be a positive integer, got {self.width!r}",
            )
        object.__setattr__(self, "align", parse_alignment(self.align, self.label))


@dataclass(frozen=True)
class ColumnSpec:
    """export 컬럼 하나 (추출 결과, 불변)."""
    name: str
    label: str
    order: int
    width: int
    alignment: Alignment
    is_group_key: bool = False

    @classmethod
    def from_export_field(cls, name: str, meta: ExportField) -> "ColumnSpec":
        return cls(
            name=name,
            label=meta.label,
            order=meta.order,
            width=meta.width,
            alignment=meta.align,
            is_group_key=meta.sub_group,
        )


@dataclass(frozen=True)
class GroupKeyField:
    """소그룹 키 필드. 선언 순서대로 이어 붙여 복합 그룹 값을 만든다."""
    name: str
    label: str


@dataclass(frozen=True)
class ColumnLayout:
    """
    카탈로그 추출 결과.

    columns: order 오름차순 (동일 order는 선언 순서 유지)
    group_fields: 선언 순서
    """
    columns: tuple[ColumnSpec, ...] = ()
    group_fields: tuple[GroupKeyField, ...] = ()

    @property
    def is_empty(self) -> bool:
        """컬럼 필드가 없으면 렌더할 것이 없음 (no-op 조건)."""
        return not self.columns

    @property
    def column_count(self) -> int:
        return len(self.columns)


# =============================================================================
# Style Values
# =============================================================================

@dataclass(frozen=True)
class FontSpec:
    """폰트 지시자."""
    bold: bool = False
    size: int = BODY_FONT_SIZE
    name: str | None = None


@dataclass(frozen=True)
class CellStyle:
    """
    셀 스타일 값 (불변).

    border: 네 변 모두에 적용할 openpyxl border style ("thin" 등), None이면 없음
    """
    font: FontSpec = field(default_factory=FontSpec)
    horizontal: Alignment | None = None
    vertical: str | None = None
    wrap_text: bool = False
    border: str | None = None

    def with_alignment(self, alignment: Alignment) -> "CellStyle":
        """정렬만 바꾼 새 스타일 (나머지 지시자는 그대로 복사)."""
        return replace(self, horizontal=alignment)


@dataclass(frozen=True)
class StyleSet:
    """
    헤더/소그룹/데이터 스타일 슬롯.

    None 슬롯은 렌더 시 기본 스타일로 채워진다.
    """
    header: CellStyle | None = None
    sub_group: CellStyle | None = None
    data: CellStyle | None = None


# =============================================================================
# Run Log Schemas
# =============================================================================

@dataclass
class WarningLog:
    """
    경고 로그.

    경고 필수 컨텍스트: level, code, field_name, row, message
    """
    level: str = "warning"
    code: str = ""
    field_name: str = ""
    row: int | None = None
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "code": self.code,
            "field_name": self.field_name,
            "row": self.row,
            "message": self.message,
        }


@dataclass
class ExportLog:
    """
    export 실행 로그.

    호출 단위 결과 및 렌더 통계.
    """
    run_id: str
    started_at: str  # ISO 8601
    finished_at: str | None = None
    result: str = "pending"  # pending, success, failed

    # Render stats
    rows_written: int = 0
    sub_group_rows: int = 0

    # Events
    warnings: list[WarningLog] = field(default_factory=list)

    # Error (if failed)
    error_code: str | None = None
    error_context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "run_id": self.run_id,
            "started_at": self.started_at,
            "finished_at": self.finished_at,
            "result": self.result,
            "rows_written": self.rows_written,
            "sub_group_rows": self.sub_group_rows,
            "warnings": [w.to_dict() for w in self.warnings],
            "error_code": self.error_code,
            "error_context": self.error_context,
        }
