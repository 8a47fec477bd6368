# Routes package init
"""
NoteKeeper Backend: API Routes Package
=======================================

Route Inventory:
    - accounts.py: POST /account, POST /login, GET /get-user
    - notes.py:    POST/GET /notes, GET /notes/search,
                   PUT /notes/{id}, DELETE /notes/{id},
                   PUT /notes/pin/{id}, PUT /notes/unpin/{id}
    - health.py:   GET /health, GET /

Routes are thin: extract request data, call the service, wrap the result in
the `{error: false, data, message}` envelope. Business rules live in services.
"""
