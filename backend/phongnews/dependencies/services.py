"""
Service dependencies. Tests swap the store or mailer through
``app.dependency_overrides``.
"""
from fastapi import Depends

from phongnews.config import Settings, get_settings
from phongnews.database.base import KVStore
from phongnews.database.connections import get_store
from phongnews.services.auth_service import AuthService
from phongnews.services.mailer import Mailer
from phongnews.services.record_service import RecordService


def get_mailer(settings: Settings = Depends(get_settings)) -> Mailer:
    """Dependency to get Mailer instance."""
    return Mailer(settings)


def get_auth_service(
    store: KVStore = Depends(get_store),
    mailer: Mailer = Depends(get_mailer),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(store, mailer, settings)


def get_record_service(store: KVStore = Depends(get_store)) -> RecordService:
    """Dependency to get RecordService instance."""
    return RecordService(store)
