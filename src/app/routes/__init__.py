"""
FastAPI Routes.

API 라우트 (REST)
"""

from . import exports

__all__ = ["exports"]
