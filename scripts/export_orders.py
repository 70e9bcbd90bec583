#!/usr/bin/env python3
"""
export_orders.py - 데모 주문 데이터 XLSX export

1. 주문 N건 생성 (국가/지역 무작위)
2. 국가 → 지역 → 주문시간 순 정렬 (소그룹 행이 묶이도록)
3. export_to_xlsx로 저장

사용법:
    # 기본 실행 (30건, exports/orders.xlsx)
    uv run python scripts/export_orders.py

    # 건수/출력 경로 지정
    uv run python scripts/export_orders.py --count 100 --output out/orders.xlsx

    # YAML 컬럼 테이블 사용 (dict 레코드)
    uv run python scripts/export_orders.py --columns columns/orders.yaml
"""

import argparse
import logging
import random
import sys
from dataclasses import asdict
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from src.core.catalog import load_column_table  # noqa: E402
from src.core.config import ExportSettings, load_config  # noqa: E402
from src.domain.errors import ExportError  # noqa: E402
from src.domain.orders import Order  # noqa: E402
from src.render.excel import export_to_xlsx  # noqa: E402

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

COUNTRIES = ("China", "Japan", "Canada")


def generate_orders(count: int, seed: int | None = None) -> list[Order]:
    """데모 주문 생성 후 국가, 지역, 주문시간 순으로 정렬."""
    rng = random.Random(seed)
    orders = []
    for i in range(1, count + 1):
        orders.append(
            Order(
                order_no=f"OrderNo{i}",
                order_user=f"User{i}",
                order_time=f"Time{i}",
                order_amount=f"{rng.randrange(10000)}.00",
                order_desc=f"Desc{i}",
                order_remark=f"Remark{i}",
                order_phone=f"Phone{i}",
                order_zip_code=f"ZipCode{i}",
                order_country=rng.choice(COUNTRIES),
                order_province=f"Province{i % 3}",
                order_city=f"City{i}",
                order_address_detail=f"AddressDetail{i}",
            )
        )
    orders.sort(key=lambda o: (o.order_country, o.order_province, o.order_time))
    return orders


def main() -> int:
    settings = ExportSettings.from_config(load_config())

    parser = argparse.ArgumentParser(description="데모 주문 XLSX export")
    parser.add_argument("--count", type=int, default=30, help="주문 건수 (기본: 30)")
    parser.add_argument("--seed", type=int, default=None, help="난수 시드")
    parser.add_argument(
        "--output",
        type=Path,
        default=PROJECT_ROOT / settings.output_dir / "orders.xlsx",
        help="출력 파일 경로",
    )
    parser.add_argument(
        "--columns",
        type=Path,
        default=None,
        help="YAML 컬럼 테이블 (지정 시 dict 레코드로 export)",
    )
    args = parser.parse_args()

    orders = generate_orders(args.count, args.seed)

    try:
        if args.columns is not None:
            records = [asdict(o) for o in orders]
            columns = load_column_table(args.columns)
            path = export_to_xlsx(
                records, args.output, columns=columns, sheet_title=settings.sheet_title
            )
        else:
            path = export_to_xlsx(orders, args.output, sheet_title=settings.sheet_title)
    except ExportError as e:
        logger.error(f"Export failed: {e}")
        return 1

    logger.info(f"Wrote {len(orders)} orders to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
