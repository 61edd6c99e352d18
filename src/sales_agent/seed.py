"""
Demo data for a fresh inbox.

Timestamps are relative to the moment the store is built so the inbox
always looks recently active.
"""

from datetime import datetime, timedelta

from .models.customer import Customer, LeadStatus
from .models.knowledge_base import KnowledgeBaseItem, KnowledgeCategory
from .models.message import Message, MessageDirection
from .models.user import Business
from .models.timestamps import local_now
from .store import InboxStore


def demo_business(business_id: str = 'b1', name: str = 'Volt Motors (Demo)') -> Business:
    return Business(id=business_id, name=name, whatsapp_phone_number='+1 555-0000')


def demo_customers(business_id: str, now: datetime) -> list[Customer]:
    return [
        Customer(
            id='1',
            business_id=business_id,
            name='Alice Johnson',
            phone_number='+1 555-0102',
            tags=['interest_in_premium', 'returning'],
            lead_status=LeadStatus.WARM,
            notes='Inquired about annual billing discounts last week.',
            created_at=now - timedelta(days=5),
            last_message_at=now - timedelta(hours=1),
        ),
        Customer(
            id='2',
            business_id=business_id,
            name='Bob Smith',
            phone_number='+1 555-0103',
            tags=['cold_outreach'],
            lead_status=LeadStatus.COLD,
            notes='Not interested right now, follow up in 6 months.',
            created_at=now - timedelta(days=20),
            last_message_at=now - timedelta(days=2),
        ),
        Customer(
            id='3',
            business_id=business_id,
            name='Charlie Davis',
            phone_number='+1 555-0104',
            tags=['urgent', 'high_budget'],
            lead_status=LeadStatus.HOT,
            notes='Ready to sign contract as soon as pricing is confirmed.',
            created_at=now - timedelta(hours=1),
            last_message_at=now,
        ),
    ]


def demo_messages(business_id: str, now: datetime) -> list[Message]:
    return [
        Message(
            id='m1',
            business_id=business_id,
            customer_id='1',
            direction=MessageDirection.INCOMING,
            content='Hi, I saw your premium plan. Does it include multiple user accounts?',
            timestamp=now - timedelta(hours=2),
        ),
        Message(
            id='m2',
            business_id=business_id,
            customer_id='1',
            direction=MessageDirection.OUTGOING,
            content='Hello Alice! Yes, the Premium plan includes up to 5 staff accounts.',
            timestamp=now - timedelta(hours=1.5),
        ),
        Message(
            id='m3',
            business_id=business_id,
            customer_id='3',
            direction=MessageDirection.INCOMING,
            content="I'm ready to move forward. Can you send me the final quote for the enterprise package?",
            timestamp=now - timedelta(minutes=30),
        ),
    ]


def demo_knowledge_base(business_id: str, now: datetime) -> list[KnowledgeBaseItem]:
    return [
        KnowledgeBaseItem(
            id='k1',
            business_id=business_id,
            title='Premium Plan Details',
            content='Our Premium plan costs $49/mo and includes unlimited customers, '
            '5 staff accounts, and priority support.',
            category=KnowledgeCategory.PRICING,
            created_at=now,
        ),
        KnowledgeBaseItem(
            id='k2',
            business_id=business_id,
            title='Refund Policy',
            content='We offer a full 14-day money back guarantee if you are not '
            'satisfied with the product.',
            category=KnowledgeCategory.POLICY,
            created_at=now,
        ),
    ]


def build_demo_store(business_id: str = 'b1', now: datetime | None = None) -> InboxStore:
    """Build an InboxStore populated with the demo inbox."""
    now = now or local_now()
    return InboxStore(
        business_id,
        customers=demo_customers(business_id, now),
        messages=demo_messages(business_id, now),
        knowledge_base=demo_knowledge_base(business_id, now),
    )
