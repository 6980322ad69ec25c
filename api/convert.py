"""Vercel 라우트 엔트리 — /api/convert"""
from xhs_copy.api.handler import handler  # noqa: F401
