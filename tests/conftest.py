"""
Pytest fixtures for the export tests.

테스트 구성:
- dataclass 레코드 (field metadata)
- dict 레코드 + 컬럼 테이블
- 빈 워크시트
"""

from dataclasses import dataclass, field
from pathlib import Path

import pytest
from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from src.domain.orders import Order, export_field
from src.domain.schemas import Alignment, ExportField

# =============================================================================
# Path Fixtures
# =============================================================================

@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def orders_columns_path(project_root: Path) -> Path:
    """columns/orders.yaml 경로."""
    return project_root / "columns" / "orders.yaml"


# =============================================================================
# Record Fixtures
# =============================================================================

@dataclass
class Shipment:
    """테스트용 레코드: 국가로 그룹, no/time 컬럼."""
    country: str | None = field(
        default=None, metadata=export_field("국가", sub_group=True)
    )
    no: str | None = field(
        default=None, metadata=export_field("번호", order=1, align=Alignment.CENTER)
    )
    time: str | None = field(
        default=None, metadata=export_field("시간", order=2, align=Alignment.RIGHT)
    )
    memo: str | None = None  # export 대상 아님


@pytest.fixture
def shipments() -> list[Shipment]:
    """CN, CN, JP 순서의 레코드 3건."""
    return [
        Shipment(country="CN", no="1", time="t1", memo="a"),
        Shipment(country="CN", no="2", time="t2", memo="b"),
        Shipment(country="JP", no="3", time="t3", memo="c"),
    ]


@pytest.fixture
def dict_columns() -> list[tuple[str, ExportField]]:
    """dict 레코드용 컬럼 테이블."""
    return [
        ("country", ExportField("국가", sub_group=True)),
        ("province", ExportField("지역", sub_group=True)),
        ("no", ExportField("번호", order=1, align=Alignment.CENTER)),
        ("amount", ExportField("금액", order=2, width=15, align=Alignment.RIGHT)),
        ("city", ExportField("도시", order=3)),
    ]


@pytest.fixture
def dict_records() -> list[dict]:
    """국가/지역 그룹이 바뀌는 dict 레코드."""
    return [
        {"country": "CN", "province": "P1", "no": "1", "amount": 100, "city": "C1"},
        {"country": "CN", "province": "P1", "no": "2", "amount": 200, "city": "C2"},
        {"country": "CN", "province": "P2", "no": "3", "amount": None, "city": "C3"},
        {"country": "JP", "province": "P2", "no": "4", "amount": 400},
    ]


@pytest.fixture
def sample_orders() -> list[Order]:
    """Order 레코드 2건 (같은 국가/지역)."""
    return [
        Order(
            order_no="OrderNo1",
            order_user="User1",
            order_time="Time1",
            order_amount="10.00",
            order_desc="Desc1",
            order_country="Canada",
            order_province="Province1",
            order_city="City1",
            order_address_detail="Addr1",
        ),
        Order(
            order_no="OrderNo2",
            order_user="User2",
            order_time="Time2",
            order_amount="20.00",
            order_country="Canada",
            order_province="Province1",
            order_city="City2",
            order_address_detail="Addr2",
        ),
    ]


# =============================================================================
# Sheet Fixtures
# =============================================================================

@pytest.fixture
def worksheet() -> Worksheet:
    """새 워크북의 빈 시트."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Data"
    return ws
