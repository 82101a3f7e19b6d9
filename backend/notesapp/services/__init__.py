# Services package init
"""
Notes Backend — Services Layer
================================

Sits between the routes (HTTP) and the database (persistence).

Service Inventory:
    - NoteService: create, read, update and delete notes
"""
