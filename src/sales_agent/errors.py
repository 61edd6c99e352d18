"""
Exception hierarchy for the SalesAgent CRM core.

Auth errors carry the exact text shown to the operator. Store errors are
raised for unknown customers and rejected records. OpenAI failures are
wrapped into typed errors before they are logged; the assistant never lets
them escape.
"""

from typing import Any

import openai


class SalesAgentError(Exception):
    """Base exception; `context` holds structured details for the logs."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


# Auth


class AuthError(SalesAgentError):
    """Authentication failure. `message` is shown to the operator verbatim."""

    default_message = 'Authentication failed.'

    def __init__(self, message: str | None = None, context: dict[str, Any] | None = None):
        super().__init__(message or self.default_message, context)


class InvalidCredentialsError(AuthError):
    default_message = 'Invalid email or password. Please try again.'


class SessionExpiredError(AuthError):
    """Stored token could not be decoded into a user."""

    default_message = 'Session expired.'


# OpenAI


class ClientError(SalesAgentError):
    """An outbound service call failed."""


class OpenAIError(ClientError):
    pass


class OpenAIRateLimitError(OpenAIError):
    pass


class OpenAIModelError(OpenAIError):
    """The model refused the request or its answer was unusable."""


# Store


class StoreError(SalesAgentError):
    """In-memory inbox rejected an operation."""


class CustomerNotFoundError(StoreError):
    pass


class ValidationError(StoreError):
    """A record or field update failed validation or crossed tenants."""


# Assist


class AssistError(SalesAgentError):
    """Internal to the assistant; converted into a fallback value."""


class ClassificationError(AssistError):
    """Model output could not be turned into a lead status."""


def wrap_openai_error(exc: Exception, context: dict[str, Any] | None = None) -> OpenAIError:
    """
    Map a raw SDK (or transport) exception onto the OpenAIError family.

    Rate limiting is recognised from the SDK type or the message text, since
    some proxies surface it as a generic status error.
    """
    ctx = dict(context or {})
    ctx['original_error'] = str(exc)
    ctx['error_type'] = type(exc).__name__

    text = str(exc).lower()
    if isinstance(exc, openai.RateLimitError) or 'rate limit' in text or 'rate_limit' in text:
        return OpenAIRateLimitError(f"OpenAI rate limit exceeded: {exc}", context=ctx)
    if 'content policy' in text or 'refused' in text:
        return OpenAIModelError(f"OpenAI model refused request: {exc}", context=ctx)
    return OpenAIError(f"OpenAI API error: {exc}", context=ctx)
