"""
FastAPI Routes.

API 라우트 (JSON) + 페이지 라우트 (HTML)
"""

from . import pages, read_file

__all__ = ["pages", "read_file"]
