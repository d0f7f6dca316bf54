import logging

from chatstore.database.config.config import Settings
from chatstore.database.config.log_config import configure_logging


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql+asyncpg://u:p@db/chat")
    monkeypatch.setenv("BCRYPT_ROUNDS", "10")

    config = Settings()

    assert config.DATABASE_URL == "postgresql+asyncpg://u:p@db/chat"
    assert config.BCRYPT_ROUNDS == 10
    assert config.DB_ECHO is False


def test_configure_logging_sets_level():
    logger = configure_logging("debug")

    assert logger.name == "chatstore"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    configure_logging("warning")
    assert len(logger.handlers) == 1
