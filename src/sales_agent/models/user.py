"""
User, business and auth response models.

One user belongs to exactly one business through `business_id`. The
relationship is not enforced: a single tenant is assumed.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .timestamps import LocalTimestamp, local_now


class UserRole(str, Enum):
    """Operator role inside a business."""

    OWNER = 'OWNER'
    STAFF = 'STAFF'


class Business(BaseModel):
    """The tenant running the WhatsApp inbox."""

    id: str = Field(..., description='Business identifier')
    name: str = Field(..., description='Business display name used in replies')
    whatsapp_phone_number: str = Field(default='', description='WhatsApp sender number')
    created_at: LocalTimestamp = Field(default_factory=local_now)


class User(BaseModel):
    """An operator account. Never carries a password."""

    id: str
    business_id: str
    name: str
    email: str
    role: UserRole
    created_at: LocalTimestamp = Field(default_factory=local_now)


class AuthResponse(BaseModel):
    """Result of a successful login."""

    user: User
    token: str = Field(..., description='Opaque bearer token')
