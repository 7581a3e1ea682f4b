import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
from ..database.database import storage_error

class CategorySeedService:
    """Populates an empty categories table from a nested JSON tree"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def load_seed(path: Path) -> List[Dict[str, Any]]:
        """Read ``[{"name": ..., "children": [...]}, ...]`` from disk"""
        if not path.exists():
            raise FileNotFoundError(f"Seed file not found: {path}")
        with open(path, encoding="utf-8") as f:
            nodes = json.load(f)
        if not isinstance(nodes, list):
            raise ValueError(f"Seed file {path} must contain a list of categories")
        return nodes

    async def count_categories(self) -> int:
        """Number of stored categories"""
        try:
            async with self.db.pool.acquire() as conn:
                count = await conn.fetchval("SELECT COUNT(*) FROM categories")
                return count or 0
        except Exception as e:
            raise storage_error(e, "Counting categories") from e

    async def seed_if_empty(self, path: Path) -> int:
        """Insert the seed tree when no categories exist; return rows inserted"""
        if await self.count_categories():
            self.logger.info("Categories already present, skipping seed")
            return 0

        nodes = self.load_seed(path)
        inserted = 0
        try:
            async with self.db.pool.acquire() as conn:
                async with conn.transaction():
                    # parents are inserted before children so ids exist
                    pending = [(node, None, 0) for node in reversed(nodes)]
                    while pending:
                        node, parent_id, level = pending.pop()
                        category_id = await conn.fetchval("""
                            INSERT INTO categories (name, parent_id, level)
                            VALUES ($1, $2, $3)
                            RETURNING category_id
                        """, node["name"], parent_id, level)
                        inserted += 1
                        for child in reversed(node.get("children") or []):
                            pending.append((child, category_id, level + 1))
        except Exception as e:
            self.logger.error(f"Error seeding categories: {e}")
            raise storage_error(e, "Seeding categories") from e

        self.logger.info(f"Seeded {inserted} categories from {path.name}")
        return inserted

    async def ensure_seeded(self, path: Optional[Path] = None) -> int:
        """Seed when empty and return the resulting category count"""
        if path is not None:
            await self.seed_if_empty(path)
        count = await self.count_categories()
        self.logger.info(f"Database ready with {count} categories")
        return count
