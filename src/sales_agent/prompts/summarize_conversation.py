"""Executive summary prompt for a single conversation."""

from collections.abc import Sequence

from ..models.message import Message
from .formatting import format_conversation

SUMMARY_MAX_WORDS = 20

SUMMARY_SYSTEM_PROMPT = f"""You write executive summaries of WhatsApp sales conversations for a sales lead manager.

Provide a highly concise (max {SUMMARY_MAX_WORDS} words) summary.
Focus on customer intent and current blocker.
Output only the summary."""

SUMMARY_USER_PROMPT_TEMPLATE = """Summarize this conversation.

<conversation>
{conversation}
</conversation>"""


def build_summary_prompt(messages: Sequence[Message]) -> list[dict[str, str]]:
    """Build the summary prompt messages for OpenAI."""
    user_prompt = SUMMARY_USER_PROMPT_TEMPLATE.format(
        conversation=format_conversation(messages),
    )

    return [
        {'role': 'system', 'content': SUMMARY_SYSTEM_PROMPT},
        {'role': 'user', 'content': user_prompt},
    ]
