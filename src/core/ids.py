"""
ID 생성: run_id

export 호출마다 새 run_id 발급 (결정론적일 필요 없음).
"""

import uuid
from datetime import UTC, datetime

from src.domain.constants import RUN_ID_PREFIX


def generate_run_id() -> str:
    """
    Run ID 생성.

    고유성 보장: UUID v4
    포맷: RUN-{timestamp}-{uuid[:8]}

    Returns:
        run_id 문자열
    """
    now = datetime.now(UTC)
    timestamp = now.strftime("%Y%m%d%H%M%S")
    unique = uuid.uuid4().hex[:8]

    return f"{RUN_ID_PREFIX}{timestamp}-{unique}"


def sanitize_filename(value: str, default: str = "export") -> str:
    """
    다운로드 파일명으로 쓸 수 있도록 문자열 정리.

    - 공백 → 밑줄
    - ASCII 영숫자와 "-_." 외 문자 제거 (한글 포함)
    - 최대 50자 (확장자 제외)
    """
    stem = value[:-5] if value.lower().endswith(".xlsx") else value

    sanitized = ""
    for c in stem:
        if (c.isascii() and c.isalnum()) or c in "-_.":
            sanitized += c
        elif c == " ":
            sanitized += "_"
        # 그 외 문자는 무시

    # 연속 밑줄 정리
    while "__" in sanitized:
        sanitized = sanitized.replace("__", "_")

    sanitized = sanitized.strip("_.")[:50]
    return f"{sanitized or default}.xlsx"
