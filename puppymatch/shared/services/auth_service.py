"""
Authentication Service

Business logic for user registration, login and token verification.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, JWT)
- Domain rules (email normalization, password policy)

Identity Flow:
==============
    register(email, password)
        normalize + validate   → ValidationError (no store access)
        hash password
        INSERT user            → DuplicateIdentityError on unique violation
        issue token

    login(email, password)
        normalize              → InvalidCredentialsError if malformed
        SELECT by email        → InvalidCredentialsError if missing
        verify hash            → InvalidCredentialsError if wrong
        issue token

    verify_token(token)        → user UUID | InvalidTokenError
        pure: signature + expiry + subject, never touches the store

Usage:
======
    from puppymatch.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token, expires = await service.register_user(email, password)
    user_id = AuthService.verify_token(token)
"""

from datetime import timedelta
from typing import Tuple
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.config.settings import settings
from puppymatch.shared.core.exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ValidationError,
)
from puppymatch.shared.core.logging import get_logger
from puppymatch.shared.models.user import User
from puppymatch.shared.repositories.user_repository import UserRepository
from puppymatch.shared.utils.security import SecurityUtils
from puppymatch.shared.utils.text import has_control_characters, is_utf8_encodable


logger = get_logger("puppymatch.auth")


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/password
    - User authentication (login)
    - JWT token issuing and verification

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # NORMALIZATION
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def normalize_email(raw_email: str) -> str:
        """
        Validate an address-like string and lowercase it entirely.

        Args:
            raw_email: Email as typed by the user

        Returns:
            Lowercased, syntactically valid email

        Raises:
            ValidationError: If empty or not a valid address
        """
        candidate = (raw_email or "").strip()
        if not candidate:
            raise ValidationError(
                "Please provide both an email and a password.",
                details={"field": "email"},
            )

        if has_control_characters(candidate):
            raise ValidationError(
                "Please provide a valid email address.",
                details={"field": "email"},
            )

        try:
            validated = validate_email(candidate, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValidationError(
                "Please provide a valid email address.",
                details={"field": "email"},
            ) from exc

        return validated.normalized.lower()

    @staticmethod
    def _check_password_policy(password: str) -> None:
        if not password:
            raise ValidationError(
                "Please provide both an email and a password.",
                details={"field": "password"},
            )
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Your password is too short. It must be at least "
                f"{settings.PASSWORD_MIN_LENGTH} characters.",
                details={"field": "password", "min_length": settings.PASSWORD_MIN_LENGTH},
            )
        if len(password) > settings.PASSWORD_MAX_LENGTH:
            raise ValidationError(
                f"Your password is too long. It must be at most "
                f"{settings.PASSWORD_MAX_LENGTH} characters.",
                details={"field": "password", "max_length": settings.PASSWORD_MAX_LENGTH},
            )
        if not is_utf8_encodable(password):
            raise ValidationError(
                "Your password contains unsupported characters.",
                details={"field": "password"},
            )

    # ═══════════════════════════════════════════════════════════════════════════
    # TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def issue_token(user_id: UUID) -> Tuple[str, int]:
        """
        Issue a signed identity token for a user.

        Args:
            user_id: Subject of the token

        Returns:
            Tuple of (token, expires_in_seconds)
        """
        token = SecurityUtils.create_access_token(
            subject=str(user_id),
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60

    @staticmethod
    def verify_token(token: str) -> UUID:
        """
        Verify a bearer token and return the user id it names.

        Pure function of the token and SECRET_KEY. It does not check that
        the user still exists; the request boundary does that.

        Args:
            token: Encoded JWT

        Returns:
            The user UUID from the `sub` claim

        Raises:
            InvalidTokenError: If malformed, wrongly signed, expired, or the
                subject is not a UUID
        """
        if not token:
            raise InvalidTokenError()

        try:
            payload = SecurityUtils.decode_access_token(
                token,
                settings.SECRET_KEY,
                algorithm=settings.JWT_ALGORITHM,
            )
            return UUID(str(payload["sub"]))
        except (ValueError, KeyError) as exc:
            logger.info("Token rejected", reason=str(exc))
            raise InvalidTokenError() from exc

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION & LOGIN
    # ═══════════════════════════════════════════════════════════════════════════

    async def register_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Register a new user.

        No existence pre-check: the insert itself detects duplicates
        through the unique email constraint.

        Args:
            email: User's email address (any casing)
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: If email or password fail validation
            DuplicateIdentityError: If email already registered
            StoreUnavailableError: If the database is unreachable
        """
        normalized_email = self.normalize_email(email)
        self._check_password_policy(password)

        password_hash = SecurityUtils.hash_password(password)
        user = await self.repo.insert_user(
            email=normalized_email,
            password_hash=password_hash,
        )

        access_token, expires_in = self.issue_token(user.id)

        logger.info("User registered", user_id=str(user.id))
        return user, access_token, expires_in

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Unknown email and wrong password raise the same error with the same
        message.

        Args:
            email: User's email address (any casing)
            password: Plain text password

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            ValidationError: If email or password is empty
            InvalidCredentialsError: If credentials are invalid
            StoreUnavailableError: If the database is unreachable
        """
        if not (email or "").strip() or not password:
            raise ValidationError("Please provide both your email and password.")

        try:
            normalized_email = self.normalize_email(email)
        except ValidationError as exc:
            SecurityUtils.dummy_verify()
            raise InvalidCredentialsError() from exc

        user = await self.repo.get_by_email(normalized_email)
        if not user:
            SecurityUtils.dummy_verify()
            raise InvalidCredentialsError()

        # No stored hash was made from an unencodable password
        if not is_utf8_encodable(password) or not SecurityUtils.verify_password(
            password, user.password_hash
        ):
            raise InvalidCredentialsError()

        access_token, expires_in = self.issue_token(user.id)

        logger.info("User logged in", user_id=str(user.id))
        return user, access_token, expires_in
