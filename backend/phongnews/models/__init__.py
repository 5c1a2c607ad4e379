"""
Persisted document models.
"""
from phongnews.models.user import User, utc_now_iso

__all__ = ["User", "utc_now_iso"]
