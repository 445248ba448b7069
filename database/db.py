"""
Database layer with PostgreSQL connection pooling.
Promoter and campaign documents are stored as JSONB, keyed by document id.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional, Any, List, Dict
import config

logger = logging.getLogger(__name__)
_pool = None

# Timeout for acquiring connection from pool (seconds)
POOL_ACQUIRE_TIMEOUT = 10.0


async def init_db():
    """Initialize database pool and document tables"""
    global _pool
    import asyncpg

    logger.info("Connecting to PostgreSQL...")
    _pool = await asyncpg.create_pool(
        config.DATABASE_URL,
        min_size=config.DB_POOL_MIN,
        max_size=config.DB_POOL_MAX,
        max_inactive_connection_lifetime=300,
        command_timeout=60,
    )
    logger.info(f"PostgreSQL pool initialized (min={config.DB_POOL_MIN}, max={config.DB_POOL_MAX})")

    await _create_schema()


async def close_db():
    global _pool
    if _pool:
        await _pool.close()
        _pool = None
        logger.info("PostgreSQL pool closed")


@asynccontextmanager
async def get_connection():
    """Get connection from pool with timeout"""
    if not _pool:
        raise RuntimeError("Database pool not initialized")

    try:
        conn = await asyncio.wait_for(
            _pool.acquire(),
            timeout=POOL_ACQUIRE_TIMEOUT
        )
    except asyncio.TimeoutError:
        logger.error(f"Failed to acquire DB connection within {POOL_ACQUIRE_TIMEOUT}s - pool may be exhausted")
        raise RuntimeError(f"Database connection pool timeout after {POOL_ACQUIRE_TIMEOUT}s")

    try:
        yield DBWrapper(conn)
    finally:
        await _pool.release(conn)


class DBWrapper:
    """Consistent interface for asyncpg"""
    def __init__(self, conn):
        self.conn = conn

    async def execute(self, query: str, *args):
        return await self.conn.execute(query, *args)

    async def fetch(self, query: str, *args) -> List[Dict]:
        return [dict(r) for r in await self.conn.fetch(query, *args)]

    async def fetchrow(self, query: str, *args) -> Optional[Dict]:
        row = await self.conn.fetchrow(query, *args)
        return dict(row) if row else None

    async def fetchval(self, query: str, *args) -> Any:
        return await self.conn.fetchval(query, *args)


async def _create_schema():
    """Create document tables with lock to prevent race conditions"""
    async with get_connection() as db:
        lock_acquired = await db.fetchval("SELECT pg_try_advisory_lock(48151)")

        if not lock_acquired:
            logger.info("Schema initialization in progress by another worker, skipping...")
            return

        try:
            await db.execute("""
                CREATE TABLE IF NOT EXISTS promoters (
                    id TEXT PRIMARY KEY,
                    data JSONB NOT NULL DEFAULT '{}',
                    updated_at TIMESTAMP DEFAULT NOW()
                );
            """)
            await db.execute("""
                CREATE TABLE IF NOT EXISTS campaigns (
                    id TEXT PRIMARY KEY,
                    data JSONB NOT NULL DEFAULT '{}',
                    updated_at TIMESTAMP DEFAULT NOW()
                );
            """)
            await db.execute(
                "CREATE INDEX IF NOT EXISTS idx_campaigns_promoters ON campaigns USING GIN ((data->'promoters') jsonb_path_ops)"
            )
            logger.info("Schema ready")
        finally:
            await db.fetchval("SELECT pg_advisory_unlock(48151)")
