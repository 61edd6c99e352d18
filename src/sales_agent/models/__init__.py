"""
Data models for the SalesAgent CRM core.

All records carry business_id as the tenant partition key.
"""

from .customer import Customer, LeadStatus
from .message import Message, MessageDirection, MessageType
from .knowledge_base import KnowledgeBaseItem, KnowledgeCategory
from .user import AuthResponse, Business, User, UserRole

__all__ = [
    'Customer',
    'LeadStatus',
    'Message',
    'MessageDirection',
    'MessageType',
    'KnowledgeBaseItem',
    'KnowledgeCategory',
    'AuthResponse',
    'Business',
    'User',
    'UserRole',
]
