import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker


def _build_database_url() -> str:
    """
    Determine the database URL.

    - Prefer DATABASE_URL from the environment (production).
    - Fallback to a local SQLite file for development.
    - Normalize legacy postgres:// URLs to SQLAlchemy's postgresql+psycopg2://.
    """
    url = os.getenv("DATABASE_URL", "sqlite:///./campus_carbon.db").strip()

    if url.startswith("postgres://"):
        # SQLAlchemy 2.x expects a driver-qualified URL
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)

    return url


DATABASE_URL = _build_database_url()

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    # Needed for SQLite when used with FastAPI's threadpool
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, connect_args=connect_args, future=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def describe_engine() -> dict:
    """Backend, masked URL and (for SQLite) file details of the active engine."""
    url = engine.url
    backend = url.get_backend_name()
    info = {
        "backend": backend,
        "url": url.render_as_string(hide_password=True),
    }

    if backend == "sqlite":
        db_path = Path(url.database or "").resolve()
        exists = db_path.exists()
        info.update(
            {
                "sqlite_path": str(db_path),
                "sqlite_exists": exists,
                "sqlite_size_bytes": db_path.stat().st_size if exists else 0,
            }
        )
    else:
        info.update(
            {
                "database": url.database,
                "host": url.host,
                "port": url.port,
                "drivername": url.drivername,
            }
        )
    return info


# Helpful DB diagnostics printed once at startup
_info = describe_engine()
print(f"[DB] Using database backend={_info['backend']} url={_info['url']}", flush=True)
