# Routes package init
"""
Notekeep Backend — API Routes Package
=======================================

Route Inventory:
    - notes.py:   GET/POST       /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - users.py:   GET/POST       /api/users
    - login.py:   POST           /api/login
    - health.py:  GET            /health

Routes stay thin: read the request, call a repository or service, pick
the status code. Error responses come from the handlers in main.py.
"""
