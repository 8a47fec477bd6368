"""
NoteKeeper Backend: Custom Exception Hierarchy
===============================================

What:  Application-specific exceptions for every failure the API reports.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) translate them
       into the failure envelope `{"error": <message>, "details": ...}` with
       the status code stored on the class.
Who:   Raised by the security layer and services; caught by global handlers.

Exception Hierarchy:
    NoteKeeperError (base)                     → 500
    ├── ValidationError                        → 400
    │   ├── MissingFieldError                  → 400 (MissingField)
    │   └── InvalidQueryError                  → 400 (InvalidQuery)
    ├── ConflictError                          → 400 (duplicate unique key)
    ├── InvalidCredentialError                 → 400 (wrong password)
    ├── AccountNotFoundError                   → 400 (login with unknown email)
    ├── AuthenticationError                    → 401 (Unauthenticated)
    │   ├── InvalidTokenError                  → 401 (bad signature / claims)
    │   ├── TokenExpiredError                  → 401 (past expiry)
    │   └── MalformedTokenError                → 401 (unparsable token)
    ├── NotFoundError                          → 404 (absent or not owned)
    ├── DatabaseError                          → 500 (Internal)
    └── ConfigurationError                     → 500 (startup misconfiguration)

NotFoundError is used for both "does not exist" and "belongs to another
account"; the two cases produce identical responses.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  Client-facing error description (returned as `error`)
        context:  Debug info; logged, and returned only where a handler opts in
        kind:     Stable machine-readable error kind
        status_code: HTTP status the global handler responds with
    """

    status_code: int = 500
    kind: str = "internal"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoteKeeperError):
    """Client input failed validation and can be corrected."""

    status_code = 400
    kind = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class MissingFieldError(ValidationError):
    """A required body field is absent or empty."""

    kind = "missing_field"

    def __init__(self, field: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=f"{field} is required", field=field, context=context)


class InvalidQueryError(ValidationError):
    """The search query parameter is missing or blank."""

    kind = "invalid_query"

    def __init__(
        self,
        message: str = "Invalid search query",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, field="query", context=context)


class ConflictError(NoteKeeperError):
    """
    A unique key already exists.

    Reported as 400 rather than 409 to keep the public contract of the
    account-creation endpoint.
    """

    status_code = 400
    kind = "conflict"

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidCredentialError(NoteKeeperError):
    """Login password did not match the stored hash."""

    status_code = 400
    kind = "invalid_credential"

    def __init__(
        self,
        message: str = "invalid password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AccountNotFoundError(NoteKeeperError):
    """Login referenced an email with no account."""

    status_code = 400
    kind = "account_not_found"

    def __init__(
        self,
        message: str = "user not found",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class AuthenticationError(NoteKeeperError):
    """
    The request carries no usable bearer credential.

    Subclasses record why verification failed. The reason is kept in
    `reason` for server-side logs; every subclass shares the same public
    response so clients cannot probe token internals.
    """

    status_code = 401
    kind = "unauthenticated"
    reason = "missing"

    def __init__(
        self,
        message: str = "Missing credentials",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidTokenError(AuthenticationError):
    reason = "invalid_signature"

    def __init__(self, message: str = "Invalid token", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class TokenExpiredError(AuthenticationError):
    reason = "expired"

    def __init__(self, message: str = "Token has expired", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class MalformedTokenError(AuthenticationError):
    reason = "malformed"

    def __init__(self, message: str = "Malformed token", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested resource does not exist for the caller.

    Ownership-scoped lookups raise this both when the record is missing and
    when it belongs to another account.
    """

    status_code = 404
    kind = "not_found"

    def __init__(
        self,
        resource: str = "resource",
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        super().__init__(message=message or f"{resource.capitalize()} not found", context=ctx)
        self.resource = resource


class DatabaseError(NoteKeeperError):
    """
    Raised when a storage operation fails unexpectedly.

    The underlying error text is stored in `context["original_error"]` and is
    only exposed to clients outside production.
    """

    status_code = 500
    kind = "internal"

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConfigurationError(NoteKeeperError):
    """Required configuration is missing or invalid."""

    status_code = 500
    kind = "configuration_error"

    def __init__(
        self,
        message: str = "Application is misconfigured",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
