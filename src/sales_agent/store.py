"""
In-memory state for one business inbox.

InboxStore owns the customer, message and knowledge base collections and is
the only place they are mutated. Derived views (sorted inbox, last message,
thread) are computed on read and never stored.

Invariants:
- Every record belongs to the store's business_id
- A customer's last_message_at never moves backwards
- Messages are append-only
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .errors import CustomerNotFoundError, ValidationError
from .logging import get_logger
from .models.customer import Customer
from .models.knowledge_base import KnowledgeBaseItem
from .models.message import Message, MessageDirection, MessageType
from .models.timestamps import local_now

logger = get_logger(__name__)

# Fields owned by the store, not by callers of update_customer
PROTECTED_CUSTOMER_FIELDS = frozenset({'id', 'business_id', 'created_at', 'last_message_at'})


@dataclass(frozen=True)
class ConversationSummary:
    """One inbox row: a customer with their most recent message."""

    customer: Customer
    last_message: Message | None


class InboxStore:
    """
    Customers, messages and knowledge base of a single business.

    Usage:
        store = InboxStore('b1', customers=..., messages=..., knowledge_base=...)
        store.send_message('3', 'Quote is on its way!')
        rows = store.conversation_list()
    """

    def __init__(
        self,
        business_id: str,
        customers: Iterable[Customer] = (),
        messages: Iterable[Message] = (),
        knowledge_base: Iterable[KnowledgeBaseItem] = (),
    ):
        self.business_id = business_id
        self._customers: dict[str, Customer] = {}
        self._messages: list[Message] = []
        self._knowledge_base: tuple[KnowledgeBaseItem, ...] = ()

        for customer in customers:
            self._check_tenant(customer.business_id, 'customer', customer.id)
            self._customers[customer.id] = customer
        for message in messages:
            self._check_tenant(message.business_id, 'message', message.id)
            if message.customer_id not in self._customers:
                raise CustomerNotFoundError(
                    f'Message {message.id} references unknown customer',
                    context={'customer_id': message.customer_id},
                )
            self._messages.append(message)
        kb_items = tuple(knowledge_base)
        for item in kb_items:
            self._check_tenant(item.business_id, 'knowledge base item', item.id)
        self._knowledge_base = kb_items

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @property
    def knowledge_base(self) -> tuple[KnowledgeBaseItem, ...]:
        return self._knowledge_base

    @property
    def customers(self) -> list[Customer]:
        """Customers in insertion order."""
        return list(self._customers.values())

    @property
    def messages(self) -> list[Message]:
        """All messages in append order."""
        return list(self._messages)

    def get_customer(self, customer_id: str) -> Customer:
        """
        Raises:
            CustomerNotFoundError: If the id is unknown
        """
        try:
            return self._customers[customer_id]
        except KeyError:
            raise CustomerNotFoundError(
                f'Customer {customer_id} not found',
                context={'customer_id': customer_id},
            )

    def thread(self, customer_id: str) -> list[Message]:
        """Messages of one customer, oldest first."""
        self.get_customer(customer_id)
        # sorted() is stable: equal timestamps keep append order
        return sorted(
            (m for m in self._messages if m.customer_id == customer_id),
            key=lambda m: m.timestamp,
        )

    def last_message(self, customer_id: str) -> Message | None:
        """Most recent message of one customer, or None."""
        thread = self.thread(customer_id)
        return thread[-1] if thread else None

    def conversation_list(self) -> list[ConversationSummary]:
        """Inbox rows, most recently active customer first."""
        customers = sorted(
            self._customers.values(),
            key=lambda c: c.last_message_at,
            reverse=True,
        )
        return [
            ConversationSummary(customer=c, last_message=self.last_message(c.id))
            for c in customers
        ]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def send_message(self, customer_id: str | None, content: str) -> Message | None:
        """
        Append an OUTGOING text message and bump the customer's last_message_at.

        Returns:
            The new message, or None when no customer is selected
        """
        if customer_id is None:
            return None
        return self._append(customer_id, content, MessageDirection.OUTGOING)

    def receive_message(self, customer_id: str, content: str) -> Message:
        """Append an INCOMING text message (simulated WhatsApp inbound)."""
        return self._append(customer_id, content, MessageDirection.INCOMING)

    def update_customer(self, customer_id: str, **fields: Any) -> Customer:
        """
        Merge fields into a customer; unspecified fields are untouched.

        Raises:
            CustomerNotFoundError: If the id is unknown
            ValidationError: For unknown, protected or invalid fields
        """
        customer = self.get_customer(customer_id)

        unknown = set(fields) - set(Customer.model_fields)
        protected = set(fields) & PROTECTED_CUSTOMER_FIELDS
        if unknown or protected:
            raise ValidationError(
                'Customer update rejected',
                context={'unknown': sorted(unknown), 'protected': sorted(protected)},
            )

        try:
            updated = Customer.model_validate({**customer.model_dump(), **fields})
        except PydanticValidationError as e:
            raise ValidationError(
                'Invalid customer field value',
                context={'customer_id': customer_id, 'errors': e.errors(include_url=False)},
            )

        self._customers[customer_id] = updated
        logger.info('store.customer.updated', customer_id=customer_id, fields=sorted(fields))
        return updated

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _append(self, customer_id: str, content: str, direction: MessageDirection) -> Message:
        customer = self.get_customer(customer_id)

        timestamp = max(local_now(), customer.last_message_at)
        message = Message(
            business_id=self.business_id,
            customer_id=customer_id,
            direction=direction,
            content=content,
            message_type=MessageType.TEXT,
            timestamp=timestamp,
        )
        self._messages.append(message)
        self._customers[customer_id] = customer.model_copy(update={'last_message_at': timestamp})

        logger.info(
            'store.message.appended',
            customer_id=customer_id,
            message_id=message.id,
            direction=direction.value,
        )
        return message

    def _check_tenant(self, business_id: str, kind: str, record_id: str) -> None:
        if business_id != self.business_id:
            raise ValidationError(
                f'{kind.capitalize()} {record_id} belongs to another business',
                context={'expected': self.business_id, 'actual': business_id},
            )
