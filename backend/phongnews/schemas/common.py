"""
Shared response schemas.
"""
from pydantic import BaseModel


class OkResponse(BaseModel):
    """Acknowledgement for record writes and health checks."""
    ok: bool = True


class ReadinessResponse(BaseModel):
    ok: bool
    store: str
