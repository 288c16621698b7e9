"""Trust edge models."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field, computed_field, model_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TrustEdge(BaseModel):
    """
    A directed assertion that `source` trusts `target`.

    Created by connect, destroyed by disconnect, never mutated otherwise.
    At most one edge exists per ordered (source, target) pair; stores enforce it.
    """

    source: str
    target: str
    trust_level: int = 1
    created_at: datetime = Field(default_factory=_utcnow)

    @model_validator(mode="after")
    def no_self_edge(self):
        if self.source == self.target:
            raise ValueError("Trust edge cannot point to its own source")
        return self

    @property
    def key(self) -> tuple:
        return (self.source, self.target)


class MutualStatus(BaseModel):
    """Edge existence in both directions between two users."""

    outgoing: bool
    incoming: bool

    @computed_field
    @property
    def mutual(self) -> bool:
        return self.outgoing and self.incoming
