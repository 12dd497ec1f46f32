from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from seshop.core.config import Settings


def _normalize_url(url: str) -> str:
    """Append sslmode=require to Postgres URLs that do not set it."""
    if not url.startswith("postgres") or "sslmode=" in url:
        return url
    if "?" in url:
        return url + "&sslmode=require"
    return url + "?sslmode=require"


class Database:
    """
    Per-process database handle.

    Built once by the application factory, opened in the lifespan
    (`create_tables`) and closed on shutdown (`dispose`).

    Engine options:
      - Postgres: pool_pre_ping + bounded pool (DB_POOL_SIZE, no overflow)
      - SQLite  : check_same_thread=False so FastAPI's threadpool can share
                  it; in-memory databases use a single static connection
    """

    def __init__(self, url: str, echo: bool = False, pool_size: int = 5):
        self.url = _normalize_url(url)

        if self.url.startswith("sqlite"):
            kwargs = {"connect_args": {"check_same_thread": False}}
            if self.url in ("sqlite://", "sqlite:///:memory:"):
                kwargs["poolclass"] = StaticPool
        else:
            kwargs = {
                "pool_pre_ping": True,
                "pool_size": pool_size,
                "max_overflow": 0,
            }

        self.engine = create_engine(self.url, echo=echo, **kwargs)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            echo=settings.DB_ECHO,
            pool_size=settings.DB_POOL_SIZE,
        )

    def create_tables(self) -> None:
        """
        Create all tables defined in SQLModel metadata if they do not exist.

        Models must be imported before this runs so the metadata is populated.
        """
        SQLModel.metadata.create_all(self.engine)

    def session(self) -> Session:
        return Session(self.engine)

    def dispose(self) -> None:
        self.engine.dispose()


def get_session(request: Request):
    """
    FastAPI dependency that yields a SQLModel Session.

    Usage:

        from fastapi import Depends

        @router.get("/example")
        def example_endpoint(session: Session = Depends(get_session)):
            ...
    """
    db: Database = request.app.state.db
    with db.session() as session:
        yield session
