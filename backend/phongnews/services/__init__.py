"""
Service layer for business logic.
"""
from phongnews.services.auth_service import AuthService
from phongnews.services.mailer import Mailer
from phongnews.services.record_service import ALLOWED_TABLES, RecordService

__all__ = [
    "AuthService",
    "Mailer",
    "RecordService",
    "ALLOWED_TABLES",
]
