"""
Operator console: the single-operator controller behind the inbox screen.

Orchestrates:
- InboxStore: customers, messages and knowledge base
- SalesAssistant: reply drafting, lead scoring, summaries
- AssistCoordinator: one in-flight request per (customer, kind),
  cancellation when the operator selects another customer

Usage:
    console = SalesConsole(store, assistant, business)
    console.select_customer('3')
    draft = await console.suggest_reply('3')
"""

from .assist.assistant import LeadClassification, SalesAssistant
from .assist.coordinator import AssistCoordinator, AssistKind
from .logging import get_logger, logging_context
from .models.customer import Customer
from .models.message import Message
from .models.user import Business
from .store import InboxStore

logger = get_logger(__name__)


class SalesConsole:
    """Selection state plus assist wiring for one operator."""

    def __init__(
        self,
        store: InboxStore,
        assistant: SalesAssistant,
        business: Business,
        coordinator: AssistCoordinator | None = None,
    ):
        self.store = store
        self.assistant = assistant
        self.business = business
        self.coordinator = coordinator or AssistCoordinator()
        self.selected_customer_id: str | None = None

    @property
    def selected_customer(self) -> Customer | None:
        if self.selected_customer_id is None:
            return None
        return self.store.get_customer(self.selected_customer_id)

    def select_customer(self, customer_id: str | None) -> Customer | None:
        """
        Switch the open conversation.

        Outstanding assist requests of the previously selected customer are
        cancelled.
        """
        if customer_id is not None:
            self.store.get_customer(customer_id)

        previous = self.selected_customer_id
        if previous is not None and previous != customer_id:
            self.coordinator.cancel_customer(previous)

        self.selected_customer_id = customer_id
        return self.selected_customer

    def send_message(self, content: str) -> Message | None:
        """Send to the selected customer; no-op when nothing is selected."""
        return self.store.send_message(self.selected_customer_id, content)

    def is_busy(self, customer_id: str, kind: AssistKind | None = None) -> bool:
        return self.coordinator.is_busy(customer_id, kind)

    async def suggest_reply(self, customer_id: str) -> str | None:
        """Magic Suggest: draft a reply for the customer's conversation."""
        thread = self.store.thread(customer_id)
        with logging_context(business_id=self.business.id, customer_id=customer_id):
            return await self.coordinator.run(
                customer_id,
                AssistKind.REPLY,
                lambda: self.assistant.generate_reply(
                    thread, self.store.knowledge_base, self.business.name
                ),
            )

    async def score_lead(self, customer_id: str) -> LeadClassification | None:
        """Classify the conversation and write the status back to the customer."""
        thread = self.store.thread(customer_id)
        with logging_context(business_id=self.business.id, customer_id=customer_id):
            result = await self.coordinator.run(
                customer_id,
                AssistKind.CLASSIFY,
                lambda: self.assistant.classify_lead(thread),
            )
            if result is None:
                return None
            self.store.update_customer(customer_id, lead_status=result.status)
            logger.info('console.lead.scored', status=result.status.value)
        return result

    async def summarize(self, customer_id: str) -> str | None:
        """Executive summary of the customer's conversation."""
        thread = self.store.thread(customer_id)
        with logging_context(business_id=self.business.id, customer_id=customer_id):
            return await self.coordinator.run(
                customer_id,
                AssistKind.SUMMARY,
                lambda: self.assistant.summarize_conversation(thread),
            )
