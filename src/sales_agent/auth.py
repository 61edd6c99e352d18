"""
Auth stub for the SalesAgent console.

Checks credentials against a fixed in-memory user table and issues an HS256
JWT carrying the user record. Verification checks the signature and expiry
and rebuilds the user from the claims; any failure is a SessionExpiredError.
"""

import asyncio
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import jwt
from pydantic import ValidationError as PydanticValidationError

from .config import config
from .errors import InvalidCredentialsError, SessionExpiredError
from .logging import get_logger
from .models.timestamps import local_now
from .models.user import AuthResponse, User, UserRole

logger = get_logger(__name__)

TOKEN_ALGORITHM = 'HS256'

# Key the session token is persisted under
SESSION_TOKEN_KEY = 'sa_token'


@dataclass(frozen=True)
class Credential:
    """A row of the mock credential table."""

    user: User
    password: str


_seeded_at = local_now()

MOCK_CREDENTIALS: tuple[Credential, ...] = (
    Credential(
        user=User(
            id='u1',
            business_id='b1',
            name='John Doe',
            email='demo@salesagent.ai',
            role=UserRole.OWNER,
            created_at=_seeded_at,
        ),
        password='password',
    ),
    Credential(
        user=User(
            id='u2',
            business_id='b1',
            name='Jane Smith',
            email='staff@salesagent.ai',
            role=UserRole.STAFF,
            created_at=_seeded_at,
        ),
        password='password',
    ),
)


def encode_token(
    user: User,
    secret: str | None = None,
    expires_hours: int | None = None,
) -> str:
    """Sign a session JWT whose `user` claim is the user record (no password)."""
    now = datetime.now(timezone.utc)
    hours = config.AUTH_TOKEN_EXPIRES_HOURS if expires_hours is None else expires_hours
    payload = {
        'sub': user.id,
        'user': user.model_dump(mode='json'),
        'iat': now,
        'exp': now + timedelta(hours=hours),
    }
    return jwt.encode(payload, secret or config.AUTH_TOKEN_SECRET, algorithm=TOKEN_ALGORITHM)


def decode_token(token: str, secret: str | None = None) -> User:
    """
    Verify a session JWT and recover its user.

    Raises:
        SessionExpiredError: Bad signature, expired, malformed, or claims
            that do not describe a user
    """
    try:
        claims = jwt.decode(
            token,
            secret or config.AUTH_TOKEN_SECRET,
            algorithms=[TOKEN_ALGORITHM],
            options={'require': ['exp', 'sub']},
        )
        user = User.model_validate(claims['user'])
    except (jwt.InvalidTokenError, PydanticValidationError, KeyError) as e:
        raise SessionExpiredError(context={'error_type': type(e).__name__})
    if user.id != claims['sub']:
        raise SessionExpiredError(context={'error_type': 'SubjectMismatch'})
    return user


class AuthService:
    """
    Simulated login and session verification endpoints.

    Both operations sleep to mimic network latency before answering.
    """

    def __init__(
        self,
        credentials: tuple[Credential, ...] = MOCK_CREDENTIALS,
        login_latency: float | None = None,
        verify_latency: float | None = None,
        token_secret: str | None = None,
        token_expires_hours: int | None = None,
    ):
        """
        Args:
            credentials: Credential table to match against
            login_latency: Seconds to wait in login (defaults to config)
            verify_latency: Seconds to wait in verify_token (defaults to config)
            token_secret: HS256 signing key (defaults to config)
            token_expires_hours: Token lifetime (defaults to config)
        """
        self.credentials = credentials
        self.login_latency = (
            config.AUTH_LOGIN_LATENCY_SECONDS if login_latency is None else login_latency
        )
        self.verify_latency = (
            config.AUTH_VERIFY_LATENCY_SECONDS if verify_latency is None else verify_latency
        )
        self.token_secret = token_secret or config.AUTH_TOKEN_SECRET
        self.token_expires_hours = (
            config.AUTH_TOKEN_EXPIRES_HOURS if token_expires_hours is None else token_expires_hours
        )

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Exact-match the credentials and issue a token.

        Raises:
            InvalidCredentialsError: If no user matches
        """
        await asyncio.sleep(self.login_latency)

        for credential in self.credentials:
            if credential.user.email == email and credential.password == password:
                logger.info('auth.login.succeeded', user_id=credential.user.id)
                user = credential.user.model_copy()
                token = encode_token(user, self.token_secret, self.token_expires_hours)
                return AuthResponse(user=user, token=token)

        logger.warning('auth.login.failed', email=email)
        raise InvalidCredentialsError()

    async def verify_token(self, token: str) -> User:
        """
        Verify a token's signature and expiry and return its user.

        Raises:
            SessionExpiredError: If the token is forged, expired or malformed
        """
        await asyncio.sleep(self.verify_latency)
        return decode_token(token, self.token_secret)


class InMemoryTokenStorage:
    """Key/value storage for the session token (browser localStorage stand-in)."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def set(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove(self, key: str) -> None:
        self._items.pop(key, None)


class SessionManager:
    """
    Caller-side session handling around AuthService.

    Persists the token under SESSION_TOKEN_KEY on login, restores it on
    startup and drops it on logout or failed verification.
    """

    def __init__(self, auth: AuthService, storage: InMemoryTokenStorage | None = None):
        self.auth = auth
        self.storage = storage if storage is not None else InMemoryTokenStorage()
        self.user: User | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    async def login(self, email: str, password: str) -> User:
        """Log in and persist the token. Propagates InvalidCredentialsError."""
        response = await self.auth.login(email, password)
        self.storage.set(SESSION_TOKEN_KEY, response.token)
        self.user = response.user
        return response.user

    async def restore(self) -> User | None:
        """Resume a saved session, clearing the token if it no longer verifies."""
        token = self.storage.get(SESSION_TOKEN_KEY)
        if not token:
            return None
        try:
            self.user = await self.auth.verify_token(token)
        except SessionExpiredError:
            logger.info('auth.session.expired')
            self.storage.remove(SESSION_TOKEN_KEY)
            self.user = None
        return self.user

    def logout(self) -> None:
        self.user = None
        self.storage.remove(SESSION_TOKEN_KEY)
