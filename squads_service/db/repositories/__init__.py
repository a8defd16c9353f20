"""
Per-domain repository modules for database access.

Each module implements create/read/update/delete for one entity; write
helpers shared by all of them live in `_session`.
"""
