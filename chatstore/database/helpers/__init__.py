"""
The `helpers` package provides utilities that support database operations
and cross-cutting concerns.

Contents
--------
- transactionManagement
    Tools for async transaction management:
        - Context variable (`db_session_context`) propagating the active session across coroutine calls
        - `@transactional` decorator wrapping a coroutine in a managed transaction:
            - Reuses an existing session if one is active in context
            - Opens, commits, and closes a new session otherwise
            - Rolls back and translates driver errors on failure

- types
    Column types shared by the entities:
        - `UTCDateTime`: timezone-aware timestamps that round-trip as UTC on every backend
        - `utcnow()`: current time as an aware UTC datetime
"""
