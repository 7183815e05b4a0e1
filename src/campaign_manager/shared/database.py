"""
SQL-backed record store using SQLAlchemy.

All namespaces share one ``kv_records`` table. The autoincrement ``seq``
column gives insertion order.
"""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import JSON, Engine, Integer, String, UniqueConstraint, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from campaign_manager.config import get_settings
from campaign_manager.shared.logging import get_logger
from campaign_manager.shared.store import Record

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Declarative base for ORM models."""


class KVRecord(Base):
    """One stored record in a namespace."""

    __tablename__ = "kv_records"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    namespace: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    key: Mapped[str] = mapped_column(String(64), nullable=False)
    value: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    __table_args__ = (
        UniqueConstraint("namespace", "key", name="uq_kv_records_namespace_key"),
    )

    def __repr__(self) -> str:
        return f"<KVRecord(namespace={self.namespace}, key={self.key})>"


class DatabaseManager:
    """Manages the database engine and sessions."""

    def __init__(self, database_url: str | None = None) -> None:
        """Initialize database manager.

        Args:
            database_url: Optional database URL override.
        """
        self._database_url = database_url or get_settings().database_url
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def engine(self) -> Engine:
        """Get or create the database engine."""
        if self._engine is None:
            self._engine = create_engine(
                self._database_url,
                echo=get_settings().debug,
                pool_pre_ping=True,
            )
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        """Get or create the session factory."""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.engine,
                expire_on_commit=False,
                autoflush=False,
            )
        return self._session_factory

    def create_all(self) -> None:
        """Create tables that do not exist yet."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """Create a new database session context committing on success."""
        with self.session_factory() as session:
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise

    def close(self) -> None:
        """Dispose the database engine."""
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
            self._session_factory = None


class SqlKeyValueStore:
    """``KeyValueStore`` implementation persisting to ``kv_records``."""

    def __init__(self, db_manager: DatabaseManager) -> None:
        self._db = db_manager
        self._db.create_all()

    def get(self, namespace: str, key: str) -> Record | None:
        with self._db.session() as session:
            row = session.execute(
                select(KVRecord.value).where(
                    KVRecord.namespace == namespace,
                    KVRecord.key == key,
                )
            ).scalar_one_or_none()
        return dict(row) if row is not None else None

    def values(self, namespace: str) -> list[Record]:
        with self._db.session() as session:
            rows = session.execute(
                select(KVRecord.value)
                .where(KVRecord.namespace == namespace)
                .order_by(KVRecord.seq)
            ).scalars().all()
        return [dict(row) for row in rows]

    def insert(self, namespace: str, key: str, value: Record) -> None:
        with self._db.session() as session:
            existing = session.execute(
                select(KVRecord).where(
                    KVRecord.namespace == namespace,
                    KVRecord.key == key,
                )
            ).scalar_one_or_none()
            if existing is None:
                session.add(KVRecord(namespace=namespace, key=key, value=dict(value)))
            else:
                existing.value = dict(value)
        logger.debug("Stored record", extra={"namespace": namespace, "key": key})


__all__ = [
    "Base",
    "DatabaseManager",
    "KVRecord",
    "SqlKeyValueStore",
]
