"""
App layer: HTTP 서버 (FastAPI).

역할:
- JSON 레코드 + 컬럼 테이블 → XLSX 응답
- ⚠️ 렌더 로직 없음 (render/core에 위임)
"""
