"""
Security utilities for authentication and authorization.
Handles session tokens, password hashing, and the access gate.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError

from inventory_api.error_handlers import NotAuthenticatedError
from inventory_api.logging_config import get_logger
from inventory_api.schemas.user import Identity

logger = get_logger("security")


# HTTP Bearer token scheme; missing credentials are handled by the gate
security_scheme = HTTPBearer(auto_error=False)


def build_password_context(rounds: int = 10) -> CryptContext:
    """Password hashing context with the given bcrypt cost factor."""
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


def verify_password(plain_password: str, hashed_password: str, context: CryptContext) -> bool:
    """
    Verify a password against its hash.

    Passwords bcrypt cannot process (NUL bytes) never match.
    """
    try:
        return context.verify(plain_password, hashed_password)
    except PasswordValueError:
        return False


def get_password_hash(password: str, context: CryptContext) -> str:
    """Hash a password using bcrypt."""
    return context.hash(password)


def dummy_verify(context: CryptContext) -> None:
    """Spend one verification's worth of time without a stored hash."""
    context.dummy_verify()


def create_session_token(
    user_id: int,
    email: str,
    role: str,
    secret_key: str,
    algorithm: str = "HS256"
) -> str:
    """
    Create a signed session token.

    Args:
        user_id: User ID
        email: Normalized email
        role: User role
        secret_key: Server-held signing secret
        algorithm: JWT signing algorithm

    Returns:
        Encoded JWT token string

    Sessions carry no ``exp`` claim and stay valid until the signing
    secret changes.
    """
    to_encode = {
        "sub": str(user_id),
        "id": user_id,
        "email": email,
        "role": role,
        "iat": datetime.now(timezone.utc)
    }

    return jwt.encode(to_encode, secret_key, algorithm=algorithm)


def decode_session_token(token: Optional[str], secret_key: str, algorithm: str = "HS256") -> Identity:
    """
    Decode and verify a session token.

    Args:
        token: JWT token string

    Returns:
        Identity carried by the token

    Raises:
        NotAuthenticatedError: If token is missing, malformed or badly signed
    """
    if not token:
        raise NotAuthenticatedError()

    try:
        payload: dict[str, Any] = jwt.decode(token, secret_key, algorithms=[algorithm])
    except JWTError:
        raise NotAuthenticatedError("Could not validate credentials")

    try:
        return Identity.model_validate(payload)
    except ValidationError:
        raise NotAuthenticatedError("Invalid session payload")


class AccessGate:
    """
    Guard for protected operations.

    Used as a FastAPI dependency, usually once per router:

        router = APIRouter(dependencies=[Depends(require_session)])

    On success the decoded identity is stored on ``request.state.identity``
    and returned. Otherwise the request is rejected with 401 before the
    endpoint runs.
    """

    async def __call__(
        self,
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme)
    ) -> Identity:
        settings = request.app.state.settings
        token = credentials.credentials if credentials else None

        try:
            identity = decode_session_token(token, settings.jwt_secret_key, settings.jwt_algorithm)
        except NotAuthenticatedError as exc:
            logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
            raise

        request.state.identity = identity
        return identity


require_session = AccessGate()
