"""
Dependencies for dependency injection in routes.
"""
from phongnews.dependencies.auth import CurrentUser, get_current_user
from phongnews.dependencies.services import (
    get_auth_service,
    get_mailer,
    get_record_service,
)

__all__ = [
    "CurrentUser",
    "get_current_user",
    "get_auth_service",
    "get_mailer",
    "get_record_service",
]
