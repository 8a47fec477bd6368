"""
NoteKeeper Backend: Security Package
=====================================

What:  Password hashing, bearer token issue/verify, and the auth gate
       dependency that every protected route goes through.

Request flow for protected routes:
    Authorization: Bearer <jwt>
        → auth_gate.get_current_account_id()
        → tokens.token_service.verify()
        → account id injected into the route handler
"""
