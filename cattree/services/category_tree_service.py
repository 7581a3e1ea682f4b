import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence
from ..database.database import storage_error
from ..exceptions import DataIntegrityError
from ..models.category import Category, CategoryNode

FETCH_ALL_QUERY = """
    SELECT category_id, name, parent_id, level
    FROM categories
    ORDER BY category_id
"""

def _by_name(rows: List[Category]) -> List[Category]:
    # sorted() is stable, so equal names keep fetch order
    return sorted(rows, key=lambda row: row.name)

def assemble(rows: Sequence[Category]) -> List[CategoryNode]:
    """Build the category forest from flat rows.

    Siblings are ordered by name, ties keeping their order in ``rows``.
    Raises DataIntegrityError for duplicate ids, parents that do not exist,
    rows unreachable from a root, and levels that disagree with depth.
    """
    by_id: Dict[int, Category] = {}
    children: Dict[Optional[int], List[Category]] = defaultdict(list)

    for row in rows:
        if row.category_id in by_id:
            raise DataIntegrityError("duplicate category id", row.category_id)
        by_id[row.category_id] = row
        children[row.parent_id].append(row)

    for row in rows:
        if row.parent_id is not None and row.parent_id not in by_id:
            raise DataIntegrityError(
                f"parent {row.parent_id} does not exist", row.category_id
            )

    # pre-order walk over (row, depth) with an explicit stack
    order: List[Category] = []
    stack = [(root, 0) for root in reversed(_by_name(children[None]))]
    while stack:
        row, depth = stack.pop()
        if row.level != depth:
            raise DataIntegrityError(
                f"level {row.level} does not match depth {depth}", row.category_id
            )
        order.append(row)
        for child in reversed(_by_name(children[row.category_id])):
            stack.append((child, depth + 1))

    if len(order) != len(by_id):
        visited = {row.category_id for row in order}
        stray = min(cid for cid in by_id if cid not in visited)
        raise DataIntegrityError("parent chain does not reach a root", stray)

    # descendants come after their ancestor in pre-order, so building in
    # reverse gives every node its finished children
    built: Dict[int, CategoryNode] = {}
    for row in reversed(order):
        built[row.category_id] = CategoryNode(
            category_id=row.category_id,
            name=row.name,
            parent_id=row.parent_id,
            level=row.level,
            children=[built.pop(child.category_id)
                      for child in _by_name(children[row.category_id])]
        )

    return [built[root.category_id] for root in _by_name(children[None])]

class CategoryTreeService:
    """Reads every category and assembles the tree in process"""

    def __init__(self, db):
        self.db = db
        self.logger = logging.getLogger(__name__)

    async def get_all_categories(self) -> List[Category]:
        """Fetch all category rows in id order"""
        try:
            async with self.db.pool.acquire() as conn:
                records = await conn.fetch(FETCH_ALL_QUERY)
            return [Category(**dict(record)) for record in records]
        except Exception as e:
            self.logger.error(f"Error fetching categories: {e}")
            raise storage_error(e, "Fetching categories") from e

    async def get_category_tree(self) -> List[CategoryNode]:
        """Fetch all rows and assemble the nested tree"""
        return assemble(await self.get_all_categories())
