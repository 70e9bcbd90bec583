"""
test_ids.py - ID/파일명 생성 테스트

DoD:
- run_id 고유성: 매 호출 시 다른 값
- 다운로드 파일명 정리
"""

import re

from src.core.ids import generate_run_id, sanitize_filename

# =============================================================================
# generate_run_id 테스트
# =============================================================================


class TestGenerateRunId:
    """generate_run_id 함수 테스트."""

    def test_format(self):
        """RUN-{14자리 timestamp}-{8자리 hex}."""
        assert re.fullmatch(r"RUN-\d{14}-[0-9a-f]{8}", generate_run_id())

    def test_unique(self):
        assert len({generate_run_id() for _ in range(50)}) == 50


# =============================================================================
# sanitize_filename 테스트
# =============================================================================


class TestSanitizeFilename:
    """sanitize_filename 함수 테스트."""

    def test_adds_extension(self):
        assert sanitize_filename("orders") == "orders.xlsx"

    def test_keeps_single_extension(self):
        assert sanitize_filename("orders.xlsx") == "orders.xlsx"

    def test_spaces_and_separators(self):
        assert sanitize_filename("my orders/../2024") == "my_orders..2024.xlsx"

    def test_non_ascii_removed(self):
        assert sanitize_filename("주문 orders") == "orders.xlsx"

    def test_empty_falls_back(self):
        assert sanitize_filename("주문") == "export.xlsx"

    def test_max_length(self):
        assert len(sanitize_filename("a" * 80)) == 50 + len(".xlsx")
