from datetime import datetime, timezone
from typing import Literal

from beanie import Document, Indexed
from pydantic import BaseModel, Field

from .timestamps import UTCDateTime


Plan = Literal["free", "pro", "team"]


class Identity(BaseModel):
    """Who a request acts for. Plan is informational only."""
    id: str
    email: str
    name: str
    plan: Plan = "free"


class StoredUser(BaseModel):
    id: str
    email: str
    name: str
    plan: Plan = "free"
    password_hash: str
    created_at: UTCDateTime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def identity(self) -> Identity:
        return Identity(id=self.id, email=self.email, name=self.name, plan=self.plan)


class UserRecord(Document):
    email: Indexed(str, unique=True)
    name: str
    plan: Plan = "free"
    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "users"

    def to_stored(self) -> StoredUser:
        return StoredUser(
            id=str(self.id),
            email=self.email,
            name=self.name,
            plan=self.plan,
            password_hash=self.password_hash,
            created_at=self.created_at,
        )
