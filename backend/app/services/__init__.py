# Services package init
"""
NoteKeeper Backend: Services Layer
===================================

What:  Business logic between routes (HTTP) and repositories (persistence).
How:   Services receive the request's db session and, for note operations,
       the account id resolved by the auth gate.

Service Inventory:
    - AccountService: create account, login, get current account
    - NoteService: owner-scoped create/list/update/delete/pin/search
    - validation: presence checks raising MissingFieldError
"""
