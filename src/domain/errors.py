"""
Error definitions for the export pipeline.

규칙:
- 빈 export(레코드 없음, 컬럼 없음)는 에러가 아님 → 조용히 no-op
- 필드 읽기 실패는 빈 셀로 강등 (FIELD_READ_FAILED 경고만 기록)
- 컬럼 정의 오류, 이종 레코드 목록 → ExportError로 명시적 실패
"""

from typing import Any


class ExportError(Exception):
    """
    Export 호출자 전제조건 위반 또는 저장 실패 시 발생하는 에러.

    즉시 중단이 필요한 경우에만 사용:
    - 컬럼 정의(label 누락, width <= 0, 잘못된 align) 오류
    - 한 번의 export 호출에 서로 다른 레코드 타입 혼재
    - 결과 파일 쓰기 실패

    Usage:
        raise ExportError("INVALID_COLUMN_SPEC", field="order_no", reason="empty label")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Column metadata ===
    INVALID_COLUMN_SPEC = "INVALID_COLUMN_SPEC"
    HETEROGENEOUS_RECORDS = "HETEROGENEOUS_RECORDS"

    # === Render ===
    FIELD_READ_FAILED = "FIELD_READ_FAILED"  # warning, not raised

    # === Output ===
    EXPORT_WRITE_FAILED = "EXPORT_WRITE_FAILED"

    # === Config ===
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
