"""
레코드 필드 읽기: 균일한 값 읽기 연산.

규칙:
- dict 계열 레코드는 key로, 그 외는 attribute로 읽는다
- None → 없음(absent), 그 외 값 → str(value)
- 읽기 실패(속성 없음, property 예외, __str__ 예외) → 없음 + 경고 로그
- 레코드는 절대 수정하지 않는다
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from src.domain.constants import GROUP_VALUE_SEPARATOR
from src.domain.schemas import GroupKeyField

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldRead:
    """필드 하나를 읽은 결과 (있음/없음 + 실패 사유)."""
    name: str
    value: str | None = None
    error: str | None = None

    @property
    def present(self) -> bool:
        return self.value is not None

    @property
    def failed(self) -> bool:
        return self.error is not None


def _raw_value(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name)


def read_field(record: Any, name: str) -> FieldRead:
    """
    레코드에서 필드 값 읽기.

    Args:
        record: dict 또는 임의 객체
        name: 필드 이름

    Returns:
        FieldRead (value=None이면 빈 셀)
    """
    try:
        value = _raw_value(record, name)
        if value is None:
            return FieldRead(name)
        return FieldRead(name, value=str(value))
    except Exception as e:
        logger.warning(
            f"Failed to read field '{name}' from {type(record).__name__}: {e}"
        )
        return FieldRead(name, error=f"{type(e).__name__}: {e}")


def read_group_fields(
    record: Any,
    group_fields: Iterable[GroupKeyField],
) -> list[FieldRead]:
    """그룹 키 필드들을 선언 순서대로 읽기."""
    return [read_field(record, gf.name) for gf in group_fields]


def join_group_value(reads: Iterable[FieldRead]) -> str:
    """
    복합 그룹 값 생성.

    값이 있는 필드만 공백 하나로 이어 붙인다 (없는 필드는 구분자도 없음).
    끝 공백은 제거.
    """
    present = [r.value for r in reads if r.value is not None]
    return GROUP_VALUE_SEPARATOR.join(present).rstrip()


def group_value(record: Any, group_fields: Iterable[GroupKeyField]) -> str:
    """레코드의 복합 그룹 값."""
    return join_group_value(read_group_fields(record, group_fields))
