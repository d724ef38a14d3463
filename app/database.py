from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.constants import DATABASE_URL, DB_TIMEOUT_SECONDS, SQL_ECHO
from app.models import Base


def _connect_args(url: str) -> dict:
    """Driver arguments that bound how long a single statement may stall."""
    if url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": DB_TIMEOUT_SECONDS}
    if url.startswith("postgresql"):
        timeout_ms = int(DB_TIMEOUT_SECONDS * 1000)
        return {"options": f"-c statement_timeout={timeout_ms}"}
    return {}


engine = create_engine(
    DATABASE_URL,
    connect_args=_connect_args(DATABASE_URL),
    echo=SQL_ECHO,
    pool_pre_ping=True,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables():
    Base.metadata.create_all(bind=engine)
