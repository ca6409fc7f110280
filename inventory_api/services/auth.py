"""
Registration, login and session verification.
"""
from typing import Optional

from fastapi import Depends, Request
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from inventory_api.core.config import Settings
from inventory_api.core.database import get_db
from inventory_api.core.security import (
    create_session_token,
    decode_session_token,
    dummy_verify,
    get_password_hash,
    verify_password,
)
from inventory_api.error_handlers import ConflictError, InvalidCredentialsError
from inventory_api.logging_config import get_logger
from inventory_api.models.user import User
from inventory_api.schemas.user import Identity, LoginRequest, RegisterRequest

logger = get_logger("auth")


class AuthService:
    """Credential store access plus session issuance."""

    def __init__(self, db: Session, settings: Settings, pwd_context: CryptContext):
        self.db = db
        self.settings = settings
        self.pwd_context = pwd_context

    def find_by_email(self, email: str) -> Optional[User]:
        result = self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def register(self, data: RegisterRequest) -> User:
        """
        Create a user account.

        The lookup is only a shortcut: two concurrent registrations can
        both pass it, so the unique constraint on ``users.email`` decides
        and its violation is reported as the same conflict.
        """
        if self.find_by_email(data.email) is not None:
            raise ConflictError("User", "email")

        # bcrypt is slow on purpose; keep it off the event loop
        password_hash = await run_in_threadpool(get_password_hash, data.password, self.pwd_context)

        user = User(email=data.email, password_hash=password_hash, role=data.role)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            if self.find_by_email(data.email) is not None:
                logger.info(f"Concurrent registration for {data.email} lost the race")
                raise ConflictError("User", "email")
            raise

        self.db.refresh(user)
        logger.info(f"Registered user id={user.id} role={user.role}")
        return user

    async def login(self, data: LoginRequest) -> str:
        """Check credentials and return a signed session token."""
        user = self.find_by_email(data.email)

        # Unknown email and wrong password look the same to the caller,
        # in body and in time spent hashing
        if user is None:
            await run_in_threadpool(dummy_verify, self.pwd_context)
            raise InvalidCredentialsError()
        if not await run_in_threadpool(verify_password, data.password, user.password_hash, self.pwd_context):
            raise InvalidCredentialsError()

        logger.info(f"User id={user.id} logged in")
        return create_session_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
            secret_key=self.settings.jwt_secret_key,
            algorithm=self.settings.jwt_algorithm
        )

    def verify_session(self, token: Optional[str]) -> Identity:
        return decode_session_token(token, self.settings.jwt_secret_key, self.settings.jwt_algorithm)


def get_auth_service(request: Request, db: Session = Depends(get_db)) -> AuthService:
    """Dependency building the auth service for one request."""
    return AuthService(db, request.app.state.settings, request.app.state.pwd_context)
