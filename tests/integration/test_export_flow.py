"""
test_export_flow.py - export 전체 흐름 통합 테스트

검증 포인트:
- 레코드 생성 → 정렬 → 컬럼 추출 → 렌더 → 저장 → 실행 로그
- dataclass 메타데이터 경로와 YAML 컬럼 테이블 경로가 같은 시트를 만든다
"""

import sys
from dataclasses import asdict
from pathlib import Path

import pytest
from openpyxl import load_workbook

from src.core.catalog import load_column_table
from src.core.logging import load_export_log, save_export_log
from src.render.excel import ExcelExporter

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from export_orders import generate_orders  # noqa: E402


@pytest.fixture
def orders():
    return generate_orders(30, seed=7)


def _sheet_rows(path: Path) -> list[tuple]:
    ws = load_workbook(path).active
    return list(ws.iter_rows(values_only=True))


class TestExportFlow:
    """주문 export 흐름."""

    def test_dataclass_and_yaml_paths_match(self, orders, orders_columns_path, tmp_path):
        dataclass_path = ExcelExporter().export(orders, tmp_path / "a.xlsx")
        yaml_exporter = ExcelExporter(columns=load_column_table(orders_columns_path))
        yaml_path = yaml_exporter.export([asdict(o) for o in orders], tmp_path / "b.xlsx")

        assert _sheet_rows(dataclass_path) == _sheet_rows(yaml_path)

    def test_sub_group_rows_match_group_changes(self, orders, tmp_path):
        """소그룹 행 수 = 정렬된 (국가, 지역) 값이 바뀌는 횟수."""
        expected_groups = []
        for order in orders:
            key = f"{order.order_country} {order.order_province}"
            if not expected_groups or expected_groups[-1] != key:
                expected_groups.append(key)

        path = ExcelExporter().export(orders, tmp_path / "orders.xlsx")

        ws = load_workbook(path).active
        merged_rows = sorted(r.min_row for r in ws.merged_cells.ranges)
        assert [ws.cell(row, 1).value for row in merged_rows] == expected_groups
        assert all(r.min_col == 1 and r.max_col == 6 for r in ws.merged_cells.ranges)
        assert ws.max_row == 1 + len(expected_groups) + len(orders)

    def test_export_log_saved(self, orders, tmp_path):
        exporter = ExcelExporter()
        exporter.export(orders, tmp_path / "orders.xlsx")

        log_path = save_export_log(exporter.last_log, tmp_path / "logs")

        data = load_export_log(log_path)
        assert data["result"] == "success"
        assert data["rows_written"] == data["sub_group_rows"] + len(orders) + 1
