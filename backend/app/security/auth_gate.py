"""
NoteKeeper Backend: Auth Gate
==============================

What:  FastAPI dependency guarding every protected route.
How:   Per request:

    NoCredential ──(no/invalid Authorization header)──────────▶ Rejected (401)
         │
    ExtractingHeader ── "Bearer <token>" ──▶ Verifying
                                               │
                        token_service.verify ──┼──▶ Rejected (401)
                                               └──▶ Authorized

On Authorized, the account id is returned to the route and also stored on
`request.state.account_id`. Services scope every note query by this id, so a
route that skips this dependency has no identity to pass them.

Expired, malformed and badly signed tokens produce the same 401 body; the
specific reason is only logged.
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.exceptions import AuthenticationError
from app.middleware.request_id import request_id_var
from app.security.tokens import token_service

logger = logging.getLogger(__name__)

# auto_error=False: a missing header is reported through our own 401
# envelope instead of FastAPI's 403 default.
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_account_id(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UUID:
    """
    Resolve the authenticated account id for this request.

    Raises:
        AuthenticationError: no credential, wrong scheme, or failed verification.
    """
    rid = request_id_var.get("")

    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        logger.warning("[%s] Rejected %s %s: no bearer credential", rid, request.method, request.url.path)
        raise AuthenticationError()

    try:
        account_id = token_service.verify(credentials.credentials)
    except AuthenticationError as exc:
        logger.warning(
            "[%s] Rejected %s %s: token %s",
            rid,
            request.method,
            request.url.path,
            exc.reason,
        )
        raise AuthenticationError("Invalid or expired token") from exc

    request.state.account_id = account_id
    return account_id
