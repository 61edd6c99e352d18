"""
Tests for the in-memory inbox store.
"""

from datetime import datetime, timedelta

import pytest

from sales_agent.errors import CustomerNotFoundError, ValidationError
from sales_agent.models import (
    Customer,
    KnowledgeBaseItem,
    LeadStatus,
    Message,
    MessageDirection,
    MessageType,
)
from sales_agent.store import InboxStore


def _customer(customer_id: str, last_message_at: datetime, business_id: str = 'b1') -> Customer:
    return Customer(
        id=customer_id,
        business_id=business_id,
        name=f'Customer {customer_id}',
        phone_number='+1 555-0100',
        last_message_at=last_message_at,
    )


class TestDerivedViews:
    """Test inbox ordering, last message and thread views."""

    def test_conversation_list_most_recent_first(self, demo_store: InboxStore):
        names = [row.customer.name for row in demo_store.conversation_list()]

        assert names == ['Charlie Davis', 'Alice Johnson', 'Bob Smith']

    def test_conversation_list_is_stable_for_equal_timestamps(self):
        same = datetime(2025, 1, 1, 9, 0)
        store = InboxStore(
            'b1',
            customers=[
                _customer('a', same),
                _customer('b', same + timedelta(minutes=5)),
                _customer('c', same),
            ],
        )

        ids = [row.customer.id for row in store.conversation_list()]

        assert ids == ['b', 'a', 'c']

    def test_last_message(self, demo_store: InboxStore):
        rows = {row.customer.id: row for row in demo_store.conversation_list()}

        assert rows['1'].last_message.id == 'm2'
        assert rows['3'].last_message.id == 'm3'
        assert rows['2'].last_message is None

    def test_thread_is_ascending_and_filtered(self, demo_store: InboxStore):
        thread = demo_store.thread('1')

        assert [m.id for m in thread] == ['m1', 'm2']
        assert all(m.customer_id == '1' for m in thread)

    def test_thread_unknown_customer(self, demo_store: InboxStore):
        with pytest.raises(CustomerNotFoundError):
            demo_store.thread('404')


class TestSendMessage:
    """Test appending outgoing messages."""

    def test_appends_one_outgoing_text_message(self, demo_store: InboxStore):
        before = [m for m in demo_store.messages if m.customer_id == '3']

        message = demo_store.send_message('3', 'Quote attached!')

        after = [m for m in demo_store.messages if m.customer_id == '3']
        assert len(after) == len(before) + 1
        assert message.direction == MessageDirection.OUTGOING
        assert message.message_type == MessageType.TEXT
        assert message.business_id == 'b1'
        assert demo_store.get_customer('3').last_message_at == message.timestamp

    def test_new_message_becomes_last_message(self, demo_store: InboxStore):
        message = demo_store.send_message('2', 'Checking in!')

        assert demo_store.last_message('2') == message
        assert demo_store.conversation_list()[0].customer.id == '2'

    def test_no_selection_is_noop(self, demo_store: InboxStore):
        count = len(demo_store.messages)

        assert demo_store.send_message(None, 'Hello?') is None
        assert len(demo_store.messages) == count

    def test_unknown_customer(self, demo_store: InboxStore):
        with pytest.raises(CustomerNotFoundError):
            demo_store.send_message('404', 'Hello?')

    def test_last_message_at_never_moves_backwards(self):
        future = datetime.now(tz=None) + timedelta(days=1)
        store = InboxStore('b1', customers=[_customer('1', future)])

        message = store.send_message('1', 'Hi')

        assert message.timestamp >= future
        assert store.get_customer('1').last_message_at == message.timestamp

    def test_receive_message_is_incoming(self, demo_store: InboxStore):
        message = demo_store.receive_message('2', 'Actually, tell me more.')

        assert message.direction == MessageDirection.INCOMING
        assert demo_store.get_customer('2').last_message_at == message.timestamp


class TestUpdateCustomer:
    """Test partial customer updates."""

    def test_merges_only_given_fields(self, demo_store: InboxStore):
        original = demo_store.get_customer('1')

        updated = demo_store.update_customer('1', notes='Wants a demo on Friday.')

        assert updated.notes == 'Wants a demo on Friday.'
        assert updated.lead_status == original.lead_status
        assert updated.tags == original.tags
        assert demo_store.get_customer('1') == updated

    def test_lead_status_override(self, demo_store: InboxStore):
        updated = demo_store.update_customer('2', lead_status='HOT')

        assert updated.lead_status is LeadStatus.HOT

    def test_rejects_invalid_lead_status(self, demo_store: InboxStore):
        with pytest.raises(ValidationError):
            demo_store.update_customer('2', lead_status='LUKEWARM')

        assert demo_store.get_customer('2').lead_status == LeadStatus.COLD

    @pytest.mark.parametrize('field', ['id', 'business_id', 'created_at', 'last_message_at', 'score'])
    def test_rejects_protected_and_unknown_fields(self, demo_store: InboxStore, field: str):
        with pytest.raises(ValidationError):
            demo_store.update_customer('1', **{field: 'x'})

    def test_unknown_customer(self, demo_store: InboxStore):
        with pytest.raises(CustomerNotFoundError):
            demo_store.update_customer('404', notes='?')


class TestTenantScoping:
    """Test that a store only accepts records of its own business."""

    def test_rejects_foreign_customer(self):
        with pytest.raises(ValidationError):
            InboxStore('b1', customers=[_customer('1', datetime(2025, 1, 1), business_id='b2')])

    def test_rejects_foreign_knowledge_base_item(self):
        item = KnowledgeBaseItem(
            id='k1', business_id='b2', title='x', content='y', category='FAQ'
        )
        with pytest.raises(ValidationError):
            InboxStore('b1', knowledge_base=[item])

    def test_rejects_message_for_unknown_customer(self):
        message = Message(
            business_id='b1',
            customer_id='ghost',
            direction=MessageDirection.INCOMING,
            content='Boo',
        )
        with pytest.raises(CustomerNotFoundError):
            InboxStore('b1', messages=[message])


class TestImportedTimestamps:
    """Records imported with ISO `Z` timestamps mix with locally created ones."""

    def _imported_customer(self, customer_id: str, last_message_at: str) -> Customer:
        return Customer.model_validate(
            {
                'id': customer_id,
                'business_id': 'b1',
                'name': f'Imported {customer_id}',
                'phone_number': '+1 555-0199',
                'lead_status': 'WARM',
                'created_at': '2025-03-01T08:00:00.000Z',
                'last_message_at': last_message_at,
            }
        )

    def test_send_message_after_import(self):
        store = InboxStore('b1', customers=[self._imported_customer('1', '2025-03-14T11:00:00.000Z')])

        message = store.send_message('1', 'hi')

        assert message is not None
        assert message.timestamp.tzinfo is None
        assert store.get_customer('1').last_message_at == message.timestamp

    def test_receive_message_keeps_future_import_monotonic(self):
        customer = self._imported_customer('1', '2999-01-01T00:00:00Z')
        store = InboxStore('b1', customers=[customer])

        message = store.receive_message('1', 'still there?')

        assert message.timestamp == customer.last_message_at

    def test_conversation_list_mixes_imported_and_local(self):
        store = InboxStore(
            'b1',
            customers=[
                _customer('local', datetime(2020, 1, 1, 9, 0)),
                self._imported_customer('imported', '2025-03-14T11:00:00.000Z'),
            ],
        )

        rows = store.conversation_list()

        assert [row.customer.id for row in rows] == ['imported', 'local']

    def test_thread_mixes_imported_and_local_messages(self):
        store = InboxStore(
            'b1',
            customers=[_customer('1', datetime(2025, 3, 14, 12, 0))],
            messages=[
                Message.model_validate(
                    {
                        'id': 'imported',
                        'business_id': 'b1',
                        'customer_id': '1',
                        'direction': 'INCOMING',
                        'content': 'Hello from the import',
                        'timestamp': '2020-06-01T10:00:00Z',
                    }
                ),
                Message(
                    id='local',
                    business_id='b1',
                    customer_id='1',
                    direction=MessageDirection.OUTGOING,
                    content='Hi!',
                    timestamp=datetime(2025, 3, 14, 12, 0),
                ),
            ],
        )

        assert [m.id for m in store.thread('1')] == ['imported', 'local']
