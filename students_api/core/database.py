import logging

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# Create Base class for models
Base = declarative_base()


# =============================================================================
# DATABASE ENGINE CONFIGURATION
# =============================================================================

def create_sqlite_engine(storage_path: str, echo: bool = False) -> Engine:
    """
    Create an engine on a SQLite database file.

    The engine is shared by all request threads; SQLite serializes the
    writes itself.
    """
    engine = create_engine(
        f"sqlite:///{storage_path}",

        # Connections are handed to the request worker threads
        connect_args={"check_same_thread": False},

        # SQL echo - useful for debugging
        echo=echo,
    )

    @event.listens_for(engine, "connect")
    def on_connect(dbapi_conn, connection_record):
        logger.debug(f"New database connection established: {storage_path}")

    return engine


# =============================================================================
# SESSION CONFIGURATION
# =============================================================================

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(
        autocommit=False,  # Don't auto-commit transactions
        autoflush=False,   # Don't auto-flush before queries
        bind=engine,
        expire_on_commit=False  # Keep generated ids readable after commit
    )


# =============================================================================
# DATABASE UTILITIES
# =============================================================================

def create_database_tables(engine: Engine) -> None:
    """
    Create all tables defined in models. Tables that already exist
    are left untouched.
    """
    # Register the models on Base.metadata
    from students_api.models import student  # noqa: F401

    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready")
