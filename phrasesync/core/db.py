from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from typing import Optional

from phrasesync.config import get_settings

# SQLAlchemy declarative base for models
Base = declarative_base()

_engine: Optional[Engine] = None
_session_factory: Optional[sessionmaker] = None


def get_engine() -> Engine:
    """Create the engine on first use from the database settings."""
    global _engine
    if _engine is None:
        db_settings = get_settings().database
        _engine = create_engine(
            db_settings.url,
            echo=db_settings.echo,
            pool_pre_ping=db_settings.pool_pre_ping,
            future=True,
        )
    return _engine


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(), autoflush=False, autocommit=False, expire_on_commit=False
        )
    return _session_factory

