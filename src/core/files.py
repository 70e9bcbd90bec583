"""
원자적 파일 쓰기: export 결과물(xlsx), 실행 로그(json)

동작:
- 중간 상태 없음: temp → rename
- 가능한 환경에서 내구성 강화: 파일 fsync + 디렉토리 fsync
- fsync 실패 시 경고 남기고 계속 진행
- 실패 시 cleanup: temp 파일 삭제
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def _fsync_dir(dir_path: Path) -> None:
    """
    디렉토리 fsync (가능한 환경에서).

    rename 후 디렉토리 엔트리까지 내구성을 강화하려면 필요.
    Linux에서 주로 유효하며, 일부 OS/파일시스템에서는 지원되지 않을 수 있음.
    """
    try:
        dir_fd = os.open(str(dir_path), os.O_RDONLY | os.O_DIRECTORY)
        try:
            os.fsync(dir_fd)
        finally:
            os.close(dir_fd)
    except (OSError, AttributeError) as e:
        # O_DIRECTORY 미지원, 권한 문제 등
        logger.warning(
            f"Directory fsync failed for {dir_path}: {e}. "
            f"Rename durability may not be guaranteed."
        )


def atomic_write_bytes(path: Path, data: bytes) -> None:
    """
    원자적 바이너리 쓰기.

    기존 파일 보존: rename 실패 시 원본 유지.

    Args:
        path: 저장할 파일 경로
        data: 파일 내용
    """
    dir_path = path.parent
    dir_path.mkdir(parents=True, exist_ok=True)

    temp_path = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=dir_path,
            suffix=".tmp",
            delete=False,
        ) as f:
            temp_path = Path(f.name)
            f.write(data)
            f.flush()
            try:
                os.fsync(f.fileno())
            except OSError as e:
                logger.warning(
                    f"File fsync failed for {path}: {e}. "
                    f"Data may not be durable on power loss."
                )

        os.replace(temp_path, path)

        _fsync_dir(dir_path)

    except Exception:
        if temp_path and temp_path.exists():
            try:
                temp_path.unlink()
            except OSError:
                pass
        raise


def atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    """원자적 JSON 쓰기 (UTF-8, 한글 그대로)."""
    payload = json.dumps(data, indent=2, ensure_ascii=False)
    atomic_write_bytes(path, payload.encode("utf-8"))
