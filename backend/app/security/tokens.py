"""
NoteKeeper Backend: Bearer Token Issuer/Verifier
=================================================

What:  Mints and verifies signed, time-bounded JWTs with python-jose.
How:   HS256 over the process-wide `ACCESS_TOKEN_SECRET`.

Claims:
    sub  account id (UUID string)
    iat  issued-at, epoch seconds
    exp  expiry, epoch seconds (default 36000 minutes after iat)

Only the account id is embedded. Profile fields and the password hash stay
in the credential store and are resolved per request where needed.

Verification outcomes:
    MalformedTokenError  header cannot be decoded, or `sub` missing / not a UUID
    TokenExpiredError    signature valid, `exp` in the past
    InvalidTokenError    signature or other claim check failed

Tokens are stateless: there is no revocation list, so a token stays valid
until `exp` even after a newer login.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import ExpiredSignatureError, JWTError, jwt

from app.config import settings
from app.exceptions import (
    ConfigurationError,
    InvalidTokenError,
    MalformedTokenError,
    TokenExpiredError,
)


class TokenService:
    """Issues and verifies bearer tokens for one signing secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 36000,
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("ACCESS_TOKEN_SECRET is not set")
        return self._secret

    def issue(self, account_id: UUID, now: Optional[datetime] = None) -> str:
        """
        Mint a token asserting `account_id`.

        Args:
            account_id: Identity of the authenticated account.
            now: Issue instant; defaults to the current UTC time.
        """
        now = now or datetime.now(timezone.utc)
        exp = now + timedelta(minutes=self.expire_minutes)
        payload = {
            "sub": str(account_id),
            "iat": int(now.timestamp()),
            "exp": int(exp.timestamp()),
        }
        return jwt.encode(payload, self._require_secret(), algorithm=self.algorithm)

    def verify(self, token: str) -> UUID:
        """
        Check signature and expiry and return the subject account id.

        Raises:
            MalformedTokenError, TokenExpiredError, InvalidTokenError
        """
        secret = self._require_secret()

        try:
            jwt.get_unverified_header(token)
        except JWTError as exc:
            raise MalformedTokenError(context={"detail": str(exc)}) from exc

        try:
            payload = jwt.decode(token, secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise InvalidTokenError(context={"detail": str(exc)}) from exc

        sub = payload.get("sub")
        if not sub:
            raise MalformedTokenError(context={"detail": "missing sub claim"})
        try:
            return UUID(str(sub))
        except ValueError as exc:
            raise MalformedTokenError(context={"detail": "sub is not an account id"}) from exc


# Secret is read once at import; settings are immutable after startup.
token_service = TokenService(
    secret=settings.access_token_secret,
    algorithm=settings.jwt_algorithm,
    expire_minutes=settings.access_token_expire_minutes,
)
