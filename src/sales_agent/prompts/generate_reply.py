"""
Reply drafting ("Magic Suggest") prompt.

The model acts as a WhatsApp sales closer grounded only in the business
knowledge base. Output is plain text, not structured.
"""

from collections.abc import Sequence

from ..models.knowledge_base import KnowledgeBaseItem
from ..models.message import Message
from .formatting import format_conversation, format_knowledge_base

REPLY_MAX_CHARACTERS = 150

UNKNOWN_ANSWER_REPLY = (
    "Great question! I'll have one of our specialists get back to you on that ASAP. "
    'Is there anything else I can help with?'
)

REPLY_SYSTEM_PROMPT = f"""ACT AS: Elite WhatsApp Sales Closer for "{{business_name}}".
GOAL: Provide a helpful, high-intent response that moves the lead to the next stage.

MANDATORY CONSTRAINTS:
1. TONE: Human-like, professional yet enthusiastic. Use conversational WhatsApp language (avoid corporate speak).
2. LENGTH: ABSOLUTE MAXIMUM {REPLY_MAX_CHARACTERS} characters. Be punchy and concise.
3. CALL TO ACTION: You MUST end the message with a clear question or a specific next step (e.g., "Ready for the link?", "What time works for a call?").
4. FORMATTING: Use exactly 1 relevant emoji to keep it friendly (e.g., 🚀, ✅, ✨).
5. UNCERTAINTY: If the Knowledge Base doesn't have the answer, say: "{UNKNOWN_ANSWER_REPLY}"

OUTPUT ONLY THE SUGGESTED WHATSAPP MESSAGE."""

REPLY_USER_PROMPT_TEMPLATE = """FACTUAL DATA (KNOWLEDGE BASE):
<knowledge_base>
{knowledge_base}
</knowledge_base>

CURRENT CHAT HISTORY:
<conversation>
{conversation}
</conversation>

Write the next OUTGOING message."""


def build_reply_prompt(
    messages: Sequence[Message],
    knowledge_base: Sequence[KnowledgeBaseItem],
    business_name: str,
) -> list[dict[str, str]]:
    """
    Build the reply drafting prompt messages for OpenAI.

    Args:
        messages: Full conversation, oldest first
        knowledge_base: Every knowledge base item of the business
        business_name: Name the closer speaks for

    Returns:
        List of message dicts for OpenAI chat completion
    """
    user_prompt = REPLY_USER_PROMPT_TEMPLATE.format(
        knowledge_base=format_knowledge_base(knowledge_base),
        conversation=format_conversation(messages),
    )

    return [
        {'role': 'system', 'content': REPLY_SYSTEM_PROMPT.format(business_name=business_name)},
        {'role': 'user', 'content': user_prompt},
    ]
