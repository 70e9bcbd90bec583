"""
test_export_orders.py - 데모 export 스크립트 테스트
"""

import sys
from pathlib import Path

from openpyxl import load_workbook

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent / "scripts"))

from export_orders import generate_orders, main  # noqa: E402


class TestGenerateOrders:
    """generate_orders 함수 테스트."""

    def test_count(self):
        assert len(generate_orders(30, seed=1)) == 30

    def test_sorted_by_country_province_time(self):
        orders = generate_orders(30, seed=1)
        keys = [(o.order_country, o.order_province, o.order_time) for o in orders]

        assert keys == sorted(keys)

    def test_seed_reproducible(self):
        assert generate_orders(10, seed=3) == generate_orders(10, seed=3)


class TestMain:
    """CLI 실행 테스트."""

    def test_writes_workbook(self, tmp_path: Path, monkeypatch):
        output = tmp_path / "orders.xlsx"
        monkeypatch.setattr(
            sys, "argv", ["export_orders.py", "--count", "5", "--seed", "1", "--output", str(output)]
        )

        assert main() == 0
        ws = load_workbook(output).active
        assert ws["A1"].value == "주문번호"

    def test_yaml_columns(self, tmp_path: Path, monkeypatch, orders_columns_path: Path):
        output = tmp_path / "orders.xlsx"
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "export_orders.py",
                "--count", "5",
                "--output", str(output),
                "--columns", str(orders_columns_path),
            ],
        )

        assert main() == 0
        assert load_workbook(output).active["F1"].value == "상세주소"

    def test_missing_columns_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setattr(
            sys,
            "argv",
            [
                "export_orders.py",
                "--output", str(tmp_path / "x.xlsx"),
                "--columns", str(tmp_path / "missing.yaml"),
            ],
        )

        assert main() == 1
