"""
AI assist client: reply drafting, lead classification and summaries.

Every public operation is total. It always returns a value of its declared
type and never raises past this boundary (task cancellation excepted). Real
failures are wrapped, logged and replaced by fixed fallback values, because
results feed straight into operator-facing state.

Model output is untrusted text: the classification status is validated
against the closed LeadStatus set before it is returned.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import ValidationError as PydanticValidationError

from ..clients.openai_client import OpenAIClient
from ..errors import ClassificationError, wrap_openai_error
from ..logging import RequestTimer, get_logger
from ..models.customer import LeadStatus
from ..models.knowledge_base import KnowledgeBaseItem
from ..models.message import Message
from ..prompts import (
    LeadClassificationOutput,
    build_classify_prompt,
    build_reply_prompt,
    build_summary_prompt,
)

logger = get_logger(__name__)

# Fallback values returned instead of errors
REPLY_FAILED = 'Unable to generate AI reply at this moment.'
REPLY_EMPTY = "I'm sorry, I couldn't generate a response."
CLASSIFY_FAILED_REASONING = 'Analysis failed.'
CLASSIFY_NO_REASONING = 'No reasoning provided.'
SUMMARY_NO_HISTORY = 'No conversation history.'
SUMMARY_FAILED = 'Could not summarize.'
SUMMARY_EMPTY = 'Summary unavailable.'


@dataclass(frozen=True)
class LeadClassification:
    """Validated lead classification."""

    status: LeadStatus
    reasoning: str

    @classmethod
    def failed(cls) -> 'LeadClassification':
        """Safe default: least urgent bucket."""
        return cls(status=LeadStatus.COLD, reasoning=CLASSIFY_FAILED_REASONING)

    def to_dict(self) -> dict[str, str]:
        return {'status': self.status.value, 'reasoning': self.reasoning}


def parse_lead_status(raw: str | None) -> LeadStatus:
    """
    Validate a model-produced status against the closed LeadStatus set.

    Surrounding whitespace and letter case are ignored.

    Raises:
        ClassificationError: If the value is missing or not a LeadStatus
    """
    if not raw or not raw.strip():
        raise ClassificationError('Model returned an empty status')
    try:
        return LeadStatus(raw.strip().upper())
    except ValueError:
        raise ClassificationError(
            f'Model returned an unknown status: {raw!r}',
            context={'allowed': [s.value for s in LeadStatus]},
        )


class SalesAssistant:
    """
    Stateless AI helper used by the inbox.

    Usage:
        assistant = SalesAssistant(OpenAIClient())
        reply = await assistant.generate_reply(thread, knowledge_base, 'Acme')
    """

    def __init__(self, openai_client: OpenAIClient):
        """
        Initialize the assistant.

        Args:
            openai_client: Configured OpenAI client
        """
        self.openai_client = openai_client

    async def generate_reply(
        self,
        messages: Sequence[Message],
        knowledge_base: Sequence[KnowledgeBaseItem],
        business_name: str,
    ) -> str:
        """
        Draft the next outgoing WhatsApp message.

        Args:
            messages: Conversation, oldest first
            knowledge_base: Grounding facts for the answer
            business_name: Business the reply is written for

        Returns:
            Trimmed model output, or a fixed fallback string
        """
        prompt = build_reply_prompt(messages, knowledge_base, business_name)
        timer = RequestTimer()
        try:
            text = await self.openai_client.chat_completion(messages=prompt)
        except Exception as e:
            error = wrap_openai_error(e, context={'operation': 'generate_reply'})
            logger.error(
                'assist.reply.failed',
                error=str(error),
                error_type=type(error).__name__,
                duration_ms=timer.elapsed_ms,
            )
            return REPLY_FAILED

        reply = text.strip()
        logger.info('assist.reply.completed', length=len(reply), duration_ms=timer.elapsed_ms)
        return reply or REPLY_EMPTY

    async def classify_lead(self, messages: Sequence[Message]) -> LeadClassification:
        """
        Classify the purchase readiness of a conversation.

        Args:
            messages: Conversation, oldest first

        Returns:
            LeadClassification; COLD / "Analysis failed." when the call fails
            or the model output does not validate
        """
        prompt = build_classify_prompt(messages)
        timer = RequestTimer()
        try:
            output = await self.openai_client.chat_completion_structured(
                messages=prompt,
                response_model=LeadClassificationOutput,
            )
            status = parse_lead_status(output.status)
        except (ClassificationError, PydanticValidationError) as e:
            logger.warning(
                'assist.classify.invalid_output',
                error=str(e),
                duration_ms=timer.elapsed_ms,
            )
            return LeadClassification.failed()
        except Exception as e:
            error = wrap_openai_error(e, context={'operation': 'classify_lead'})
            logger.error(
                'assist.classify.failed',
                error=str(error),
                error_type=type(error).__name__,
                duration_ms=timer.elapsed_ms,
            )
            return LeadClassification.failed()

        reasoning = (output.reasoning or '').strip() or CLASSIFY_NO_REASONING
        logger.info(
            'assist.classify.completed',
            status=status.value,
            duration_ms=timer.elapsed_ms,
        )
        return LeadClassification(status=status, reasoning=reasoning)

    async def summarize_conversation(self, messages: Sequence[Message]) -> str:
        """
        Summarize a conversation in at most 20 words.

        An empty conversation short-circuits without calling the model.
        """
        if not messages:
            return SUMMARY_NO_HISTORY

        prompt = build_summary_prompt(messages)
        timer = RequestTimer()
        try:
            text = await self.openai_client.chat_completion(messages=prompt, temperature=0.2)
        except Exception as e:
            error = wrap_openai_error(e, context={'operation': 'summarize_conversation'})
            logger.error(
                'assist.summary.failed',
                error=str(error),
                error_type=type(error).__name__,
                duration_ms=timer.elapsed_ms,
            )
            return SUMMARY_FAILED

        summary = text.strip()
        logger.info('assist.summary.completed', duration_ms=timer.elapsed_ms)
        return summary or SUMMARY_EMPTY
