"""
test_schemas.py - 컬럼 메타데이터/스타일 값 테스트

DoD:
- ExportField 기본값 및 검증 (label, width, align)
- CellStyle.with_alignment: 정렬만 바꾼 새 값, 원본 불변
- ExportError 직렬화
"""

from dataclasses import FrozenInstanceError

import pytest

from src.domain.errors import ErrorCodes, ExportError
from src.domain.schemas import (
    Alignment,
    CellStyle,
    ColumnLayout,
    ColumnSpec,
    ExportField,
    FontSpec,
    parse_alignment,
)

# =============================================================================
# ExportField 테스트
# =============================================================================


class TestExportField:
    """ExportField 선언 테스트."""

    def test_defaults(self):
        """order=0, width=20, LEFT, sub_group=False."""
        meta = ExportField("주문번호")

        assert meta.order == 0
        assert meta.width == 20
        assert meta.align is Alignment.LEFT
        assert meta.sub_group is False

    def test_align_from_string(self):
        """문자열 정렬도 Alignment로 정규화."""
        meta = ExportField("금액", align="RIGHT")

        assert meta.align is Alignment.RIGHT

    def test_empty_label_rejected(self):
        """빈 label → INVALID_COLUMN_SPEC."""
        with pytest.raises(ExportError) as exc_info:
            ExportField("  ")

        assert exc_info.value.code == ErrorCodes.INVALID_COLUMN_SPEC

    @pytest.mark.parametrize("width", [0, -5, 1.5, True])
    def test_invalid_width_rejected(self, width):
        """양의 정수가 아닌 width → INVALID_COLUMN_SPEC."""
        with pytest.raises(ExportError) as exc_info:
            ExportField("금액", width=width)

        assert exc_info.value.code == ErrorCodes.INVALID_COLUMN_SPEC

    def test_unknown_alignment_rejected(self):
        """알 수 없는 정렬 → INVALID_COLUMN_SPEC."""
        with pytest.raises(ExportError) as exc_info:
            ExportField("금액", align="justify")

        assert exc_info.value.code == ErrorCodes.INVALID_COLUMN_SPEC
        assert "justify" in exc_info.value.context["reason"]

    def test_frozen(self):
        """선언 후 수정 불가."""
        meta = ExportField("주문번호")

        with pytest.raises(FrozenInstanceError):
            meta.order = 3  # type: ignore[misc]


class TestParseAlignment:
    """parse_alignment 함수 테스트."""

    def test_enum_passthrough(self):
        assert parse_alignment(Alignment.CENTER) is Alignment.CENTER

    def test_case_and_whitespace(self):
        assert parse_alignment(" Center ") is Alignment.CENTER


# =============================================================================
# ColumnSpec / ColumnLayout 테스트
# =============================================================================


class TestColumnSpec:
    """ColumnSpec 변환 테스트."""

    def test_from_export_field(self):
        meta = ExportField("금액", order=4, width=15, align=Alignment.RIGHT)

        spec = ColumnSpec.from_export_field("order_amount", meta)

        assert spec == ColumnSpec(
            name="order_amount",
            label="금액",
            order=4,
            width=15,
            alignment=Alignment.RIGHT,
            is_group_key=False,
        )


class TestColumnLayout:
    """ColumnLayout 테스트."""

    def test_empty_layout(self):
        """컬럼이 없으면 is_empty."""
        assert ColumnLayout().is_empty is True
        assert ColumnLayout().column_count == 0

    def test_non_empty_layout(self):
        spec = ColumnSpec("no", "번호", 1, 20, Alignment.LEFT)

        layout = ColumnLayout(columns=(spec,))

        assert layout.is_empty is False
        assert layout.column_count == 1


# =============================================================================
# CellStyle 테스트
# =============================================================================


class TestCellStyle:
    """CellStyle.with_alignment 테스트."""

    def test_with_alignment_copies_other_fields(self):
        """정렬 외 지시자는 그대로 복사."""
        base = CellStyle(
            font=FontSpec(bold=True, size=11),
            vertical="center",
            wrap_text=True,
            border="thin",
        )

        aligned = base.with_alignment(Alignment.RIGHT)

        assert aligned.horizontal is Alignment.RIGHT
        assert aligned.font == base.font
        assert aligned.vertical == "center"
        assert aligned.wrap_text is True
        assert aligned.border == "thin"

    def test_with_alignment_keeps_original(self):
        """원본 스타일은 바뀌지 않음."""
        base = CellStyle(horizontal=Alignment.LEFT)

        base.with_alignment(Alignment.CENTER)

        assert base.horizontal is Alignment.LEFT


# =============================================================================
# ExportError 테스트
# =============================================================================


class TestExportError:
    """ExportError 테스트."""

    def test_message_and_dict(self):
        error = ExportError("INVALID_COLUMN_SPEC", field="no", reason="bad")

        assert str(error) == "[INVALID_COLUMN_SPEC] field='no', reason='bad'"
        assert error.to_dict() == {
            "code": "INVALID_COLUMN_SPEC",
            "field": "no",
            "reason": "bad",
        }

    def test_message_without_context(self):
        assert str(ExportError("EXPORT_WRITE_FAILED")) == "[EXPORT_WRITE_FAILED]"
