"""
API Routers module.
"""
from phongnews.routers import auth, data, health

__all__ = ["auth", "data", "health"]
