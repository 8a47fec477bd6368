"""
NoteKeeper Backend: Account Service
====================================

What:  Account creation, login, and current-account lookup.
How:   Composes AccountRepository (credential store), the password hasher and
       the token service. Stateless; the db session is passed per call.

Create account:
    presence checks → email lookup (Conflict if taken) → hash → insert → issue token
Login:
    presence checks → email lookup (AccountNotFound) → verify (InvalidCredential) → issue token
Get current account:
    id from the auth gate → fresh lookup in the credential store

Error Handling:
    Application exceptions propagate unchanged. A unique-index violation
    from a concurrent signup becomes ConflictError. Anything else from the
    storage layer is wrapped in DatabaseError with the original message in
    its context.
"""

import logging
from uuid import UUID

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    AccountNotFoundError,
    AuthenticationError,
    ConflictError,
    DatabaseError,
    InvalidCredentialError,
    NoteKeeperError,
)
from app.repositories.account_repository import account_repository
from app.schemas.account import AccountResponse, AuthResult
from app.security.passwords import hash_password, verify_password
from app.security.tokens import token_service
from app.services.validation import require_field

logger = logging.getLogger(__name__)


class AccountService:
    """Business logic for the account lifecycle."""

    async def create_account(
        self,
        db: AsyncSession,
        username: str | None,
        password: str | None,
        email: str | None,
    ) -> AuthResult:
        """
        Register a new account and log it in.

        Raises:
            MissingFieldError: username, password or email absent (checked in that order)
            ConflictError: an account with this email already exists
            DatabaseError: storage failure
        """
        username = require_field(username, "username")
        password = require_field(password, "password", allow_blank=True)
        email = require_field(email, "email")

        try:
            existing = await account_repository.find_by_email(db, email)
            if existing is not None:
                raise ConflictError("email already exists", context={"field": "email"})

            # bcrypt is CPU-bound; keep it off the event loop
            password_hash = await run_in_threadpool(hash_password, password)
            account = await account_repository.create(
                db,
                username=username,
                email=email,
                password_hash=password_hash,
            )
        except NoteKeeperError:
            raise
        except IntegrityError as e:
            logger.info("Concurrent signup rejected by unique index for email")
            raise ConflictError("email already exists", context={"field": "email"}) from e
        except Exception as e:
            logger.error("Database error creating account: %s", str(e), exc_info=True)
            raise DatabaseError(context={"original_error": str(e)}) from e

        return AuthResult(
            account=AccountResponse.model_validate(account),
            access_token=token_service.issue(account.id),
        )

    async def login(
        self,
        db: AsyncSession,
        email: str | None,
        password: str | None,
    ) -> AuthResult:
        """
        Verify credentials and issue a fresh token.

        Previously issued tokens remain valid until they expire.

        Raises:
            MissingFieldError, AccountNotFoundError, InvalidCredentialError, DatabaseError
        """
        email = require_field(email, "email")
        password = require_field(password, "password", allow_blank=True)

        try:
            account = await account_repository.find_by_email(db, email)
        except Exception as e:
            logger.error("Database error during login: %s", str(e), exc_info=True)
            raise DatabaseError(context={"original_error": str(e)}) from e

        if account is None:
            raise AccountNotFoundError()

        matches = await run_in_threadpool(verify_password, password, account.password_hash)
        if not matches:
            logger.info("Failed login for account %s", account.id)
            raise InvalidCredentialError()

        logger.info("Login succeeded for account %s", account.id)
        return AuthResult(
            account=AccountResponse.model_validate(account),
            access_token=token_service.issue(account.id),
        )

    async def get_account(self, db: AsyncSession, account_id: UUID) -> AccountResponse:
        """
        Look up the live account record for an authenticated id.

        Raises:
            AuthenticationError: the token's subject no longer has an account
            DatabaseError: storage failure
        """
        try:
            account = await account_repository.find_by_id(db, account_id)
        except Exception as e:
            logger.error("Database error fetching account %s: %s", account_id, str(e))
            raise DatabaseError(context={"original_error": str(e)}) from e

        if account is None:
            logger.warning("Valid token for missing account %s", account_id)
            raise AuthenticationError("Account no longer exists")

        return AccountResponse.model_validate(account)


account_service = AccountService()
