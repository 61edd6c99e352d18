"""
Lead classification prompt and response model.

Uses OpenAI structured output. The status field is a plain string here;
the assistant validates it against LeadStatus.
"""

from collections.abc import Sequence

from pydantic import BaseModel, Field

from ..models.message import Message
from .formatting import format_conversation


class LeadClassificationOutput(BaseModel):
    """Raw classification as returned by the model."""

    status: str = Field(
        ...,
        description='HOT, WARM, or COLD',
    )
    reasoning: str = Field(
        ...,
        description='Short explanation of why this status was chosen',
    )


CLASSIFY_SYSTEM_PROMPT = """You analyze WhatsApp sales conversations and classify the lead status for a CRM.

Statuses:
- HOT: Customer is ready to buy, asking for payment details, or highly urgent.
- WARM: Customer shows clear interest, asks specific questions, but hasn't committed yet.
- COLD: Customer is unresponsive, says "no thanks", or is just browsing with low intent.

Output the result in JSON format with exactly two fields: "status" (one of HOT, WARM, COLD)
and "reasoning" (one short sentence)."""

CLASSIFY_USER_PROMPT_TEMPLATE = """Classify the lead in this conversation.

<conversation>
{conversation}
</conversation>"""


def build_classify_prompt(messages: Sequence[Message]) -> list[dict[str, str]]:
    """
    Build the lead classification prompt messages for OpenAI.

    Args:
        messages: Full conversation, oldest first

    Returns:
        List of message dicts for OpenAI chat completion
    """
    user_prompt = CLASSIFY_USER_PROMPT_TEMPLATE.format(
        conversation=format_conversation(messages),
    )

    return [
        {'role': 'system', 'content': CLASSIFY_SYSTEM_PROMPT},
        {'role': 'user', 'content': user_prompt},
    ]
