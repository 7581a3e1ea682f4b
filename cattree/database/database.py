import asyncio
import asyncpg
import logging
from pathlib import Path
from typing import Optional
from ..config import Config
from ..exceptions import CategoryTreeError, StorageUnavailableError, QueryExecutionError
from .tree_function import install_tree_function

CONNECTION_ERRORS = (
    OSError,
    asyncpg.exceptions.PostgresConnectionError,
    asyncpg.exceptions.InterfaceError,
)

def storage_error(exc: Exception, operation: str) -> CategoryTreeError:
    """Map a driver exception to the typed storage error"""
    if isinstance(exc, CategoryTreeError):
        return exc
    # TimeoutError is an OSError subclass, check it first
    if isinstance(exc, asyncio.TimeoutError):
        return QueryExecutionError(f"{operation}: timed out")
    if isinstance(exc, CONNECTION_ERRORS):
        return StorageUnavailableError(f"{operation}: {exc}")
    return QueryExecutionError(f"{operation}: {exc}")

class Database:
    """Connection pool and schema management"""

    def __init__(self, dsn: Optional[str] = None):
        self.dsn = dsn or Config.DATABASE_URL
        self.pool: Optional[asyncpg.Pool] = None
        self.logger = logging.getLogger(__name__)

    async def connect(self):
        """Open the pool and bring the schema up to date"""
        try:
            self.pool = await asyncpg.create_pool(
                self.dsn,
                min_size=Config.DB_POOL_MIN_SIZE,
                max_size=Config.DB_POOL_MAX_SIZE,
                command_timeout=Config.COMMAND_TIMEOUT
            )
        except Exception as e:
            self.logger.error(f"Could not connect to database: {e}")
            raise StorageUnavailableError(f"Could not connect to database: {e}") from e

        try:
            await self._run_migrations()
            async with self.pool.acquire() as conn:
                await install_tree_function(conn)
        except Exception as e:
            self.logger.error(f"Schema setup failed: {e}")
            await self.close()
            raise storage_error(e, "Schema setup") from e

        self.logger.info("Connected to database")

    async def close(self):
        """Close the pool"""
        if self.pool:
            await self.pool.close()
            self.pool = None
            self.logger.info("Database connection closed")

    async def _run_migrations(self):
        """Apply migration files not recorded in the migrations table"""
        migrations_path = Path(__file__).parent / "migrations"

        async with self.pool.acquire() as conn:
            await conn.execute("""
                CREATE TABLE IF NOT EXISTS migrations (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL,
                    applied_at TIMESTAMP WITH TIME ZONE DEFAULT CURRENT_TIMESTAMP
                )
            """)

            for migration_file in sorted(migrations_path.glob("*.sql")):
                migration_name = migration_file.name

                is_applied = await conn.fetchval(
                    "SELECT COUNT(*) FROM migrations WHERE name = $1",
                    migration_name
                )

                if not is_applied:
                    async with conn.transaction():
                        await conn.execute(migration_file.read_text())
                        await conn.execute(
                            "INSERT INTO migrations (name) VALUES ($1)",
                            migration_name
                        )

                    self.logger.info(f"Migration {migration_name} applied")
