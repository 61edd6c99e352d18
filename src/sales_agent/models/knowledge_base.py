"""Knowledge base snippets used as grounding context for reply drafting."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .timestamps import LocalTimestamp, local_now


class KnowledgeCategory(str, Enum):
    """Kind of knowledge base article."""

    FAQ = 'FAQ'
    PRICING = 'PRICING'
    POLICY = 'POLICY'


class KnowledgeBaseItem(BaseModel):
    """A static fact or policy the assistant may quote."""

    model_config = ConfigDict(frozen=True)

    id: str
    business_id: str
    title: str
    content: str
    category: KnowledgeCategory
    created_at: LocalTimestamp = Field(default_factory=local_now)

    def as_context_line(self) -> str:
        """Render as a `[CATEGORY] title: content` line for prompts."""
        return f'[{self.category.value}] {self.title}: {self.content}'
