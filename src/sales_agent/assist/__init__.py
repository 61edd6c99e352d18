"""
AI assist features: reply drafting, lead scoring and summaries.
"""

from .assistant import (
    LeadClassification,
    SalesAssistant,
    parse_lead_status,
    REPLY_FAILED,
    CLASSIFY_FAILED_REASONING,
    SUMMARY_NO_HISTORY,
    SUMMARY_FAILED,
)
from .coordinator import AssistCoordinator, AssistKind

__all__ = [
    'LeadClassification',
    'SalesAssistant',
    'parse_lead_status',
    'REPLY_FAILED',
    'CLASSIFY_FAILED_REASONING',
    'SUMMARY_NO_HISTORY',
    'SUMMARY_FAILED',
    'AssistCoordinator',
    'AssistKind',
]
