"""
Store key layout.
"""

USERS_KEY = "users"
PENDING_KEY = "pending"
DATA_KEY_PREFIX = "data_"


def data_key(table: str) -> str:
    """Key holding the record list of a collection, e.g. ``data_rooms``."""
    return f"{DATA_KEY_PREFIX}{table}"
