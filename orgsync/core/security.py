"""
Password hashing and bearer token handling.

Passwords are stored as salted bcrypt hashes. Bearer tokens are HS256 JWTs
carrying the user id and a fixed lifetime.

Dependencies: bcrypt, PyJWT, orgsync.configs
System role: Credential primitives used by the auth service and the
authentication dependency
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from orgsync.configs.auth import AuthSettings
from orgsync.core.exceptions import InvalidTokenError, TokenExpiredError, ValidationError

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


# -----------------------------------------------------------------------------
# Password Hashing
# -----------------------------------------------------------------------------

def hash_password(raw_password: str, rounds: int = 10) -> str:
    """
    Hash a plaintext password using bcrypt.

    Args:
        raw_password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        str: bcrypt hash (salt embedded)

    Raises:
        ValidationError: If the password is longer than bcrypt accepts
    """
    encoded = raw_password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"Password cannot exceed {MAX_PASSWORD_BYTES} bytes",
            field="password",
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    """
    Verify that a raw password matches its stored hash.

    Malformed hashes and oversized inputs verify as False.
    """
    encoded = raw_password.encode("utf-8")
    if len(encoded) > MAX_PASSWORD_BYTES:
        return False
    try:
        return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
    except ValueError:
        return False


# -----------------------------------------------------------------------------
# JWT Token Handling
# -----------------------------------------------------------------------------

def create_access_token(
    user_id: int,
    settings: AuthSettings,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed bearer token for a user.

    Payload format:
        {"sub": "<user id>", "user_id": <user id>, "iat": ..., "exp": ...}

    Args:
        user_id: Numeric user id embedded in the token
        settings: Auth settings providing secret, algorithm and lifetime
        expires_delta: Optional lifetime override

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    lifetime = expires_delta if expires_delta is not None else timedelta(hours=settings.token_ttl_hours)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "user_id": user_id,
        "iat": now,
        "exp": now + lifetime,
    }
    return jwt.encode(
        payload,
        settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
    )


def decode_access_token(token: str, settings: AuthSettings) -> int:
    """
    Verify a bearer token and return the embedded user id.

    Raises:
        TokenExpiredError: If the token is past its expiry
        InvalidTokenError: If the signature, format or claims are invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret.get_secret_value(),
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError:
        raise TokenExpiredError()
    except jwt.InvalidTokenError as e:
        raise InvalidTokenError(details={"reason": type(e).__name__})

    user_id = payload.get("user_id")
    if not isinstance(user_id, int) or isinstance(user_id, bool) or str(user_id) != payload["sub"]:
        raise InvalidTokenError(details={"reason": "bad subject"})
    return user_id
