"""
LLM prompts for the SalesAgent assist features.
"""

from .classify_lead import (
    CLASSIFY_SYSTEM_PROMPT,
    LeadClassificationOutput,
    build_classify_prompt,
)
from .formatting import format_conversation, format_knowledge_base
from .generate_reply import (
    REPLY_MAX_CHARACTERS,
    REPLY_SYSTEM_PROMPT,
    UNKNOWN_ANSWER_REPLY,
    build_reply_prompt,
)
from .summarize_conversation import (
    SUMMARY_MAX_WORDS,
    SUMMARY_SYSTEM_PROMPT,
    build_summary_prompt,
)

__all__ = [
    # Reply drafting
    'REPLY_MAX_CHARACTERS',
    'REPLY_SYSTEM_PROMPT',
    'UNKNOWN_ANSWER_REPLY',
    'build_reply_prompt',
    # Lead classification
    'CLASSIFY_SYSTEM_PROMPT',
    'LeadClassificationOutput',
    'build_classify_prompt',
    # Summaries
    'SUMMARY_MAX_WORDS',
    'SUMMARY_SYSTEM_PROMPT',
    'build_summary_prompt',
    # Formatting
    'format_conversation',
    'format_knowledge_base',
]
