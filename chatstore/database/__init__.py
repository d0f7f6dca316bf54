"""
The `database` package is responsible for all interactions with the relational store.
It provides configuration, entity definitions, data-access objects, and the async
operations callers use.

Contents:
    - config:
        Settings and the injectable `Database` (async engine + session factory).

    - entities:
        SQLAlchemy entity models for users, chats, messages, votes, documents
        and suggestions.

    - daos:
        Data Access Objects (DAOs) building the queries for each entity.

    - core:
        Public async operations, one module per store, each running inside
        a managed transaction.

    - helpers:
        Transaction management and shared column types.

    - exceptions:
        `StoreError` taxonomy and translation of driver errors.
"""
