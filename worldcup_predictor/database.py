from sqlmodel import SQLModel, Session, create_engine
from .config import DATABASE_URL, SQL_ECHO

# Create engine with SQLite
engine = create_engine(
    DATABASE_URL,
    echo=SQL_ECHO,
    connect_args={"check_same_thread": False}
)


def create_db_and_tables():
    """Create all database tables."""
    # Import models so their tables are registered on the metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session():
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
