from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictStr, field_validator


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(BaseModel):
    id: str
    original_url: str
    short_url: str  # same value as id
    created_at: datetime = Field(default_factory=_utcnow)


class ShortenRequest(BaseModel):
    url: StrictStr

    @field_validator("url")
    @classmethod
    def replace_lone_surrogates(cls, v: str) -> str:
        # JSON escapes like "\ud800" decode to unpaired surrogates, which
        # cannot be hashed as UTF-8 or sent in a Location header
        return v.encode("utf-16", "surrogatepass").decode("utf-16", "replace")


class ShortenResponse(BaseModel):
    short_url: str
