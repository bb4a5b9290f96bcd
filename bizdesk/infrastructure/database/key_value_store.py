"""Concrete key-value store backed by SQLAlchemy (SQLite via aiosqlite by default)."""

import asyncio
import logging
from datetime import datetime, timezone

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from bizdesk.application.interfaces import KeyValueStore
from bizdesk.infrastructure.database.base import Base
from bizdesk.infrastructure.database.models import KeyValueSlotModel
from bizdesk.infrastructure.database.session import create_session_factory

logger = logging.getLogger(__name__)

# Dialects with a native INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port with one row per slot.

    Tables are created on first use, so a fresh database needs no setup step.
    Writes are single-statement upserts, so two first writes to the same slot
    cannot collide on the primary key.
    """

    def __init__(
        self,
        engine: AsyncEngine,
        session_factory: async_sessionmaker[AsyncSession] | None = None,
    ):
        self._engine = engine
        self._session_factory = session_factory or create_session_factory(engine)
        self._schema_ready = False
        self._schema_lock = asyncio.Lock()

    async def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        async with self._schema_lock:
            if self._schema_ready:
                return
            async with self._engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._schema_ready = True
            logger.debug("kv_slots table ready on %s", self._engine.url)

    async def get(self, key: str) -> str | None:
        await self._ensure_schema()
        async with self._session_factory() as session:
            model = await session.get(KeyValueSlotModel, key)
            return model.value if model else None

    async def set(self, key: str, value: str) -> None:
        await self._ensure_schema()
        now = datetime.now(timezone.utc)
        insert = _UPSERT_INSERTS.get(self._engine.dialect.name)
        async with self._session_factory() as session:
            try:
                if insert is None:
                    await session.merge(KeyValueSlotModel(key=key, value=value, updated_at=now))
                else:
                    stmt = insert(KeyValueSlotModel).values(key=key, value=value, updated_at=now)
                    stmt = stmt.on_conflict_do_update(
                        index_elements=[KeyValueSlotModel.key],
                        set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
                    )
                    await session.execute(stmt)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def delete(self, key: str) -> bool:
        await self._ensure_schema()
        async with self._session_factory() as session:
            model = await session.get(KeyValueSlotModel, key)
            if model is None:
                return False
            await session.delete(model)
            await session.commit()
            return True

    async def dispose(self) -> None:
        """Close pooled connections."""
        await self._engine.dispose()
