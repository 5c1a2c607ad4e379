"""
Entry point for the managed host (Vercel Python runtime), which serves ``app``.
"""
from phongnews.main import app

__all__ = ["app"]
