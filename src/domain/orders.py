"""
주문 레코드: 데모/테스트용 export 대상.

컬럼 선언은 dataclass field metadata로 한다.
export 메타데이터가 없는 필드(order_desc 등)는 시트에 나오지 않는다.
"""

from dataclasses import dataclass, field

from src.domain.constants import EXPORT_METADATA_KEY
from src.domain.schemas import Alignment, ExportField


def export_field(label: str, **options) -> dict:
    """field(metadata=...)용 단축 함수."""
    return {EXPORT_METADATA_KEY: ExportField(label, **options)}


@dataclass
class Order:
    """주문 한 건."""
    order_no: str | None = field(
        default=None,
        metadata=export_field("주문번호", order=1, align=Alignment.CENTER),
    )
    order_user: str | None = field(
        default=None,
        metadata=export_field("주문자", order=2, align=Alignment.CENTER),
    )
    order_time: str | None = field(
        default=None,
        metadata=export_field("주문시간", order=3, align=Alignment.CENTER),
    )
    order_amount: str | None = field(
        default=None,
        metadata=export_field("주문금액", order=4, width=15, align=Alignment.RIGHT),
    )
    order_desc: str | None = None
    order_remark: str | None = None
    order_phone: str | None = None
    order_zip_code: str | None = None
    order_country: str | None = field(
        default=None,
        metadata=export_field("국가", sub_group=True),
    )
    order_province: str | None = field(
        default=None,
        metadata=export_field("지역", sub_group=True),
    )
    order_city: str | None = field(
        default=None,
        metadata=export_field("도시", order=6),
    )
    order_address_detail: str | None = field(
        default=None,
        metadata=export_field("상세주소", order=7),
    )
