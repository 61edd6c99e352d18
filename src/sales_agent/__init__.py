"""
SalesAgent CRM core

In-memory WhatsApp sales inbox with lead scoring and OpenAI-powered reply
drafting and conversation summaries.
"""

__version__ = '0.1.0'

# Re-export key classes for convenience
from .assist import (
    AssistCoordinator,
    AssistKind,
    LeadClassification,
    SalesAssistant,
)
from .auth import AuthService, SessionManager
from .console import SalesConsole
from .store import ConversationSummary, InboxStore
from .logging import (
    configure_logging,
    get_logger,
    logging_context,
)
from .errors import (
    SalesAgentError,
    AuthError,
    InvalidCredentialsError,
    SessionExpiredError,
    OpenAIError,
    StoreError,
    CustomerNotFoundError,
    ValidationError,
)

__all__ = [
    # Version
    '__version__',
    # Assist
    'AssistCoordinator',
    'AssistKind',
    'LeadClassification',
    'SalesAssistant',
    # Auth
    'AuthService',
    'SessionManager',
    # State
    'SalesConsole',
    'ConversationSummary',
    'InboxStore',
    # Logging
    'configure_logging',
    'get_logger',
    'logging_context',
    # Errors
    'SalesAgentError',
    'AuthError',
    'InvalidCredentialsError',
    'SessionExpiredError',
    'OpenAIError',
    'StoreError',
    'CustomerNotFoundError',
    'ValidationError',
]
