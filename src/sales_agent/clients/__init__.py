"""
External service clients for the SalesAgent CRM core.
"""

from .openai_client import OpenAIClient

__all__ = [
    'OpenAIClient',
]
