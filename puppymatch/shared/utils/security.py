"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses passlib's bcrypt scheme. Every hash embeds its own random salt and
work factor, and verification is done by passlib's comparison primitive.

JWT Tokens:
===========
Uses PyJWT. Tokens are HS256-signed with the process-wide SECRET_KEY and
carry only the user id (`sub`), issue time and expiry. Nothing is stored
server side; expiry is the only way a token stops working.

Usage:
======
    from puppymatch.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)  # True

    token = SecurityUtils.create_access_token(
        subject=str(user.id),
        secret_key=settings.SECRET_KEY,
        expires_delta=timedelta(days=7),
    )
    payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from puppymatch.config.settings import settings


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt and work factor)
        """
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        return pwd_context.verify(plain_password, hashed_password)

    @staticmethod
    def dummy_verify() -> None:
        """
        Spend the time of one password verification without a real hash.

        Called on login for unknown emails so that path costs about the same
        as a wrong password.
        """
        pwd_context.dummy_verify()

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        subject: str,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            subject: Value for the `sub` claim (the user id)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 7 days)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(days=7))

        to_encode = {
            "sub": subject,
            "iat": now,
            "exp": expire,
        }

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Signature, expiry and presence of `sub`/`exp` are all checked.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired, malformed or wrongly signed
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
