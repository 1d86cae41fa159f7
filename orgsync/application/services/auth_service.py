"""
Authentication service.

Registers accounts, exchanges credentials for bearer tokens and resolves
a bearer token back to the calling user.

Dependencies: orgsync.boundary.db.CRUD, orgsync.core.security
System role: Identity use case orchestration
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from orgsync.boundary.db.CRUD.user_crud import user_crud
from orgsync.boundary.db.models.user_model import UserModel
from orgsync.configs.auth import AuthSettings
from orgsync.core.authorization import CurrentUser
from orgsync.core.exceptions import (
    AuthenticationError,
    ConflictError,
)
from orgsync.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "Unauthorized: User not found"


def serialize_auth_user(user: UserModel) -> dict:
    """Public fields returned alongside a token."""
    return {
        "id": user.id,
        "email": user.email,
        "name": user.name,
        "role": user.role,
        "organization_id": user.organization_id,
    }


class AuthService:
    """Authentication service orchestrator."""

    def __init__(self, db: AsyncSession, settings: AuthSettings) -> None:
        """
        Initialize auth service.

        Args:
            db: Async SQLAlchemy session
            settings: Auth settings (secret, token lifetime, bcrypt cost)
        """
        self.db = db
        self.settings = settings

    async def register(
        self,
        email: str,
        password: str,
        name: str,
    ) -> dict:
        """
        Create an account and issue its first token.

        New accounts never start inside an organization. Joining one goes
        through assign_organization, which checks the target owner.

        Args:
            email: Login email (must not be registered yet)
            password: Plaintext password
            name: Display name

        Returns:
            dict: message, token and public user fields

        Raises:
            ConflictError: If the email is already registered
        """
        if await user_crud.get_by_email(self.db, email) is not None:
            logger.warning("Registration rejected: email taken")
            raise ConflictError("User already exists")

        password_hash = hash_password(password, rounds=self.settings.bcrypt_rounds)

        try:
            user = await user_crud.create(
                self.db,
                email=email,
                password_hash=password_hash,
                name=name,
            )
            await self.db.commit()
        except IntegrityError as e:
            # concurrent registration of the same email
            await self.db.rollback()
            raise ConflictError("User already exists") from e

        logger.info("User registered", extra={"user_id": user.id})

        return {
            "message": "User registered successfully",
            "token": create_access_token(user.id, self.settings),
            "user": serialize_auth_user(user),
        }

    async def login(self, email: str, password: str) -> dict:
        """
        Exchange credentials for a token.

        Unknown email and wrong password fail identically.

        Raises:
            AuthenticationError: "Invalid credentials"
        """
        user = await user_crud.get_by_email(self.db, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning("Login failed", extra={"known_user": user is not None})
            raise AuthenticationError("Invalid credentials")

        logger.info("User logged in", extra={"user_id": user.id})

        return {
            "message": "Login successful",
            "token": create_access_token(user.id, self.settings),
            "user": serialize_auth_user(user),
        }

    async def resolve_token(self, token: str) -> CurrentUser:
        """
        Verify a bearer token and load the user it names.

        Returns:
            CurrentUser: Identity for the request

        Raises:
            TokenExpiredError: Token past its expiry
            InvalidTokenError: Bad signature or claims
            AuthenticationError: Token valid but the user no longer exists
        """
        user_id = decode_access_token(token, self.settings)
        user = await user_crud.get_by_id(self.db, user_id)
        if user is None:
            raise AuthenticationError(USER_NOT_FOUND_MESSAGE, details={"user_id": user_id})

        return CurrentUser(
            id=user.id,
            email=user.email,
            role=user.role,
            organization_id=user.organization_id,
        )
