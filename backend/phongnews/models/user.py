"""
User model as persisted under the ``users`` and ``pending`` keys.
"""
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class User(BaseModel):
    """
    Stored user or pending registration draft.

    ``password`` holds the bcrypt hash; the key name is kept so existing
    store contents stay readable. Unknown keys are preserved; hand-written
    entries missing a name or hash load with empty strings.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(default="", description="Display name")
    email: str = Field(..., description="Email address, unique case-insensitively")
    password: str = Field(default="", description="Bcrypt hashed password")
    created_at: str = Field(default_factory=utc_now_iso, alias="createdAt")
    approved: bool = Field(default=False, description="Set once an admin approves the draft")

    def matches_email(self, email: str) -> bool:
        return self.email.lower() == email.lower()

    def to_store(self) -> dict[str, Any]:
        """Document written back to the store."""
        return self.model_dump(by_alias=True)

    def public(self) -> dict[str, Any]:
        """Safe representation without the password hash."""
        return self.model_dump(by_alias=True, exclude={"password"})
