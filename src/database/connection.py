"""Database connection pool and session management."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from src.utils.config import DatabaseSettings, get_database_settings

logger = logging.getLogger(__name__)

# Seconds allowed for establishing a new server connection
CONNECT_TIMEOUT_SECONDS = 2


def get_database_url() -> str:
    """Build the PostgreSQL database URL from settings.

    :returns: The database connection URL.
    """
    return get_database_settings().url


def create_db_engine(settings: DatabaseSettings | None = None, *, echo: bool = False) -> Engine:
    """Create a pooled SQLAlchemy engine for the database.

    Callers block for up to ``pool_timeout`` seconds when every pooled
    connection is checked out, after which SQLAlchemy raises ``TimeoutError``.

    :param settings: Database settings. Defaults to the cached process settings.
    :param echo: If True, log all SQL statements.
    :returns: A configured SQLAlchemy engine.
    """
    settings = settings or get_database_settings()
    logger.debug(
        f"Creating database engine: host={settings.host}, pool_size={settings.pool_size}, "
        f"pool_timeout={settings.pool_timeout}s"
    )
    return create_engine(
        settings.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_timeout=settings.pool_timeout,
        connect_args={"connect_timeout": CONNECT_TIMEOUT_SECONDS},
    )


@dataclass
class _DatabaseState:
    """Container for database connection state."""

    engine: Engine | None = field(default=None)
    session_factory: sessionmaker[Session] | None = field(default=None)


_state = _DatabaseState()


def get_engine() -> Engine:
    """Get or create the database engine singleton.

    The engine connects lazily, so building it never touches the network.

    :returns: The database engine.
    """
    if _state.engine is None:
        _state.engine = create_db_engine()
    return _state.engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory singleton.

    :returns: A sessionmaker bound to the database engine.
    """
    if _state.session_factory is None:
        _state.session_factory = sessionmaker(bind=get_engine(), expire_on_commit=False)
    return _state.session_factory


def configure_session_factory(session_factory: sessionmaker[Session] | None) -> None:
    """Replace the process-wide session factory.

    Passing None resets it so the next session uses the configured engine.

    :param session_factory: The factory to use for new sessions.
    """
    _state.session_factory = session_factory
    if session_factory is None:
        _state.engine = None


@contextmanager
def get_session() -> Iterator[Session]:
    """Open a transaction-scoped database session.

    Commits on successful completion, rolls back on exception. Writes made
    through the session are invisible to other sessions until commit.

    :yields: A database session.
    """
    session = get_session_factory()()
    try:
        yield session
        session.commit()

    except Exception:
        session.rollback()
        raise

    finally:
        session.close()
