"""
The `config` package provides two core building blocks for establishing and managing database connections.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a singleton Settings object
    - connection_engine: Database layer - shared MetaData, the declarative base for ORM models, and the injectable `Database` (async Engine + session factory)

Together they provide environment-driven configuration and a clean ORM foundation.
"""
