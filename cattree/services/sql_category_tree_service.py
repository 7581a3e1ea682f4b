import logging
from typing import List, Optional
from ..config import Config
from ..database.database import storage_error
from ..database.tree_function import TREE_QUERY
from ..models.category import FlatCategoryRow

COLUMNS = ("category_id", "name", "parent_id", "level")

class SqlCategoryTreeService:
    """Reads the tree pre-ordered by the recursive database function"""

    def __init__(self, db, prefetch: Optional[int] = None, timeout: Optional[float] = None):
        self.db = db
        self.prefetch = prefetch or Config.CURSOR_PREFETCH
        self.timeout = timeout or Config.COMMAND_TIMEOUT
        self.logger = logging.getLogger(__name__)

    async def get_category_tree(self) -> List[FlatCategoryRow]:
        """Stream the pre-ordered rows; the server order is kept as is"""
        rows = []
        try:
            async with self.db.pool.acquire() as conn:
                # server-side cursors only live inside a transaction
                async with conn.transaction(readonly=True):
                    cursor = conn.cursor(TREE_QUERY, prefetch=self.prefetch, timeout=self.timeout)
                    async for record in cursor:
                        rows.append(self._map_row(record))
        except Exception as e:
            self.logger.error(f"Error running recursive category query: {e}")
            raise storage_error(e, "Recursive category query") from e
        return rows

    @staticmethod
    def _map_row(record) -> FlatCategoryRow:
        missing = [column for column in COLUMNS if column not in record.keys()]
        if missing:
            raise KeyError(f"missing column(s): {', '.join(missing)}")
        return FlatCategoryRow(**{column: record[column] for column in COLUMNS})
