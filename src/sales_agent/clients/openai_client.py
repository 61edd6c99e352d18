"""
Thin async wrapper around the OpenAI SDK for the assist features.

Reply drafting and summaries use plain completions; lead scoring parses the
completion into a pydantic model. The wrapper never retries and never
swallows errors: `SalesAssistant` owns the fallbacks.
"""

import os
from typing import TypeVar

from openai import AsyncOpenAI
from pydantic import BaseModel

DEFAULT_CHAT_MODEL = 'gpt-4.1-mini'

ResponseT = TypeVar('ResponseT', bound=BaseModel)

ChatMessages = list[dict[str, str]]


class OpenAIClient:
    """
    Async chat client bound to one model.

    The key and model fall back to OPENAI_API_KEY and OPENAI_CHAT_MODEL.
    Construction fails fast with ValueError when no key is available.
    """

    def __init__(
        self,
        api_key: str | None = None,
        chat_model: str | None = None,
        timeout: float = 30.0,
    ):
        self.api_key = api_key or os.getenv('OPENAI_API_KEY')
        if not self.api_key:
            raise ValueError('OPENAI_API_KEY environment variable is required')
        self.chat_model = chat_model or os.getenv('OPENAI_CHAT_MODEL', DEFAULT_CHAT_MODEL)

        # One attempt per call; a failed draft is reported, not retried
        self._client = AsyncOpenAI(api_key=self.api_key, timeout=timeout, max_retries=0)

    async def chat_completion(
        self,
        messages: ChatMessages,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
    ) -> str:
        """Free-text completion. A null message body comes back as ''."""
        response = await self._client.chat.completions.create(
            model=model or self.chat_model,
            messages=messages,  # type: ignore
            temperature=temperature,
            max_tokens=max_tokens,
        )
        return response.choices[0].message.content or ''

    async def chat_completion_structured(
        self,
        messages: ChatMessages,
        response_model: type[ResponseT],
        model: str | None = None,
        temperature: float = 0.0,
    ) -> ResponseT:
        """
        Completion parsed into `response_model` via the SDK's response_format support.

        Raises:
            ValueError: The model refused or produced nothing parseable
        """
        response = await self._client.beta.chat.completions.parse(
            model=model or self.chat_model,
            messages=messages,  # type: ignore
            response_format=response_model,
            temperature=temperature,
        )
        parsed = response.choices[0].message.parsed
        if parsed is None:
            raise ValueError(f'No parsed {response_model.__name__} in model response')
        return parsed

    async def health_check(self) -> dict[str, bool | str]:
        """Look up the configured model; reports instead of raising."""
        try:
            await self._client.models.retrieve(self.chat_model)
        except Exception as e:
            return {'healthy': False, 'error': str(e)}
        return {'healthy': True, 'chat_model': self.chat_model}

    async def close(self):
        await self._client.close()
