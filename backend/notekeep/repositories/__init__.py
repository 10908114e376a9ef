# Repositories package init
"""
Notekeep Backend — Repository Layer
=====================================

What:  Persistence-facing classes that validate payloads and map them to
       stored records.
How:   Each repository is stateless; every method receives the request's
       AsyncSession. Failures are raised as tagged NotekeepError subclasses
       (see notekeep.exceptions); "no such record" is returned as None.

Repository Inventory:
    - NoteRepository: find_all, find_by_id, create, update_by_id, delete_by_id
    - UserRepository: find_all, find_by_id, find_by_username, create
"""
