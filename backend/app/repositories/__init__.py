"""
NoteKeeper Backend: Repository Layer
=====================================

What:  The only code that builds SQL for accounts and notes.
How:   Each repository method receives the request's AsyncSession and
       returns ORM objects (or None when nothing matched). Repositories
       never commit; `get_db_session` owns the transaction.

Repository Inventory:
    - AccountRepository: create / find_by_email / find_by_id
    - NoteRepository: owner-scoped create, list, get, update, pin, delete, search
"""
