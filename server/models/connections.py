"""Request/response models for trust connections."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, field_validator


class ConnectRequest(BaseModel):
    """source_user starts trusting target_user."""

    source_user: str
    target_user: str

    @field_validator("source_user", "target_user")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("user id cannot be empty")
        return v


class TrustLinkResponse(BaseModel):
    source_user: str
    target_user: str
    trust_level: int
    created_at: datetime


class ConnectionsResponse(BaseModel):
    """Both directions of a user's trust links plus the derived 1-hop neighbor set."""

    user_id: str
    connections: List[TrustLinkResponse] = []  # users this user trusts
    trusted_by: List[TrustLinkResponse] = []  # users who trust this user
    trusted_neighbors: List[str] = []


class ConnectionStatusResponse(BaseModel):
    user_id: str
    target_id: str
    outgoing: bool
    incoming: bool
    mutual: bool
