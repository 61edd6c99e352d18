"""
Customer (lead) model.

A Customer is one WhatsApp contact of the business, tracked through the
lead lifecycle:

    NEW --classify/override--> HOT | WARM | COLD

Transitions only happen through lead classification or a manual override;
there is no automatic decay.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .timestamps import LocalTimestamp, local_now


class LeadStatus(str, Enum):
    """Purchase-readiness bucket of a lead."""

    HOT = 'HOT'
    WARM = 'WARM'
    COLD = 'COLD'
    NEW = 'NEW'


class Customer(BaseModel):
    """A WhatsApp contact being worked as a sales lead."""

    id: str = Field(..., description='Customer identifier')
    business_id: str = Field(..., description='Owning business (tenant) identifier')

    # Identity
    name: str = Field(..., description='Display name')
    phone_number: str = Field(..., description='WhatsApp phone number')

    # CRM fields
    tags: list[str] = Field(default_factory=list, description='Free-form tags')
    lead_status: LeadStatus = Field(default=LeadStatus.NEW, description='Current lead bucket')
    notes: str = Field(default='', description='Operator notes')

    # Timestamps
    created_at: LocalTimestamp = Field(default_factory=local_now)
    last_message_at: LocalTimestamp = Field(
        default_factory=local_now,
        description='Timestamp of the latest message; never moves backwards',
    )
