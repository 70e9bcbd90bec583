"""
Run logging: export 실행 로그, 경고 이벤트

경고 필수 컨텍스트: level, code, field_name, row, message
(필드 읽기 실패 등 빈 셀로 강등된 경우를 추적)
"""

import json
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from src.core.files import atomic_write_json
from src.core.ids import generate_run_id
from src.domain.schemas import ExportLog, WarningLog

# =============================================================================
# Export Log Management
# =============================================================================


def create_export_log() -> ExportLog:
    """
    새 ExportLog 생성.

    Returns:
        초기화된 ExportLog
    """
    now = datetime.now(UTC).isoformat()

    return ExportLog(
        run_id=generate_run_id(),
        started_at=now,
        result="pending",
    )


def emit_warning(
    export_log: ExportLog,
    code: str,
    field_name: str,
    message: str,
    row: int | None = None,
) -> None:
    """
    경고 이벤트 기록.

    Args:
        export_log: ExportLog 인스턴스
        code: 경고 코드 (예: FIELD_READ_FAILED)
        field_name: 필드 이름
        message: 경고 메시지
        row: 시트 행 번호 (1부터)
    """
    export_log.warnings.append(
        WarningLog(
            level="warning",
            code=code,
            field_name=field_name,
            row=row,
            message=message,
        )
    )


def complete_export_log(
    export_log: ExportLog,
    success: bool,
    error_code: str | None = None,
    error_context: dict[str, Any] | None = None,
) -> None:
    """
    ExportLog 완료 처리.

    Args:
        export_log: ExportLog 인스턴스
        success: 성공 여부
        error_code: 에러 코드 (실패 시)
        error_context: 에러 컨텍스트 (실패 시)
    """
    export_log.finished_at = datetime.now(UTC).isoformat()
    export_log.result = "success" if success else "failed"

    if not success:
        export_log.error_code = error_code
        export_log.error_context = error_context


def save_export_log(export_log: ExportLog, logs_dir: Path) -> Path:
    """
    ExportLog를 파일로 저장.

    Returns:
        저장된 파일 경로 (logs_dir/run_{run_id}.json)
    """
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_path = logs_dir / f"run_{export_log.run_id}.json"
    atomic_write_json(log_path, export_log.to_dict())
    return log_path


def load_export_log(log_path: Path) -> dict[str, Any]:
    """ExportLog 파일 로드."""
    data: dict[str, Any] = json.loads(log_path.read_text(encoding="utf-8"))
    return data
