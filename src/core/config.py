"""
설정 로드: default.yaml

설정 파일이 없으면 빈 dict → 모든 값은 기본값.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import DEFAULT_SHEET_TITLE

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}
        return data


@dataclass
class ExportSettings:
    """export 섹션 설정."""
    sheet_title: str = DEFAULT_SHEET_TITLE
    output_dir: str = "exports"
    logs_dir: str = "logs"
    save_run_logs: bool = False

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ExportSettings":
        section = config.get("export") or {}
        return cls(
            sheet_title=section.get("sheet_title", DEFAULT_SHEET_TITLE),
            output_dir=section.get("output_dir", "exports"),
            logs_dir=section.get("logs_dir", "logs"),
            save_run_logs=bool(section.get("save_run_logs", False)),
        )
