from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Snippet(BaseModel):
    """A stored code fragment and its metadata."""

    id: int = Field(..., ge=0)
    tag: str = Field(..., min_length=1)
    description: str | None = None
    code: str = ""
    language: str | None = None
    timestamp: str

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


def creation_timestamp(now: datetime | None = None) -> str:
    """Render a local creation time the way it is stored on disk."""
    moment = now or datetime.now().astimezone()
    return moment.isoformat(sep=" ", timespec="microseconds")


__all__ = ["Snippet", "creation_timestamp"]
