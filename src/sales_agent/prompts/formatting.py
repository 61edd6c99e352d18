"""Shared rendering of conversations and knowledge base into prompt text."""

from collections.abc import Iterable

from ..models.knowledge_base import KnowledgeBaseItem
from ..models.message import Message


def format_conversation(messages: Iterable[Message]) -> str:
    """One `DIRECTION: content` line per message, in the given order."""
    return '\n'.join(m.as_transcript_line() for m in messages)


def format_knowledge_base(items: Iterable[KnowledgeBaseItem]) -> str:
    """One `[CATEGORY] title: content` line per knowledge base item."""
    return '\n'.join(kb.as_context_line() for kb in items)
