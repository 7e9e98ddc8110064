"""User roles, preferences and the public profile projection."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Closed set of account roles."""

    ADMIN = "admin"
    DEVELOPER = "developer"
    TESTER = "tester"
    DEVOPS = "devops"


DEFAULT_ROLE = Role.DEVELOPER


class Preferences(BaseModel):
    """Per-user dashboard preferences."""

    theme: Literal["light", "dark"] = "light"
    notifications: bool = True
    timezone: str = Field(default="UTC", min_length=1, max_length=64)


class PreferencesUpdate(BaseModel):
    """Partial preferences; only the fields sent are merged into the stored bag."""

    model_config = ConfigDict(extra="forbid")

    theme: Literal["light", "dark"] | None = None
    notifications: bool | None = None
    timezone: str | None = Field(default=None, min_length=1, max_length=64)


class UserProfile(BaseModel):
    """Outward-facing user record. Never carries the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
    avatar: str = ""
    is_active: bool = True
    last_login: datetime | None = None
    preferences: Preferences = Field(default_factory=Preferences)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CurrentUser(BaseModel):
    """Authenticated user (id, name, email, role) attached to the request; no password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    role: Role
