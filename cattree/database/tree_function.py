"""Server-side recursive traversal of the categories table.

``get_category_tree()`` walks the adjacency list with a recursive CTE and
returns every category in depth-first pre-order, siblings ascending by name.
Each row carries a sort path built from its ancestors' segments; a segment is
the category name followed by its zero-padded id, and segments are joined
with a control character that sorts below any name character. Ordering by
that path under the "C" collation therefore yields pre-order with the same
code-point name comparison Python uses, and same-named siblings keep their
subtrees contiguous, tie-broken by id.

The function returns the path alongside each row and TREE_QUERY applies the
ordering itself; row order out of a set-returning function is not guaranteed
once the planner inlines it.
"""
import logging
from ..constants import TREE_FUNCTION_NAME, SEGMENT_SEPARATOR, ID_SEPARATOR, ID_PAD_WIDTH

logger = logging.getLogger(__name__)

_SEGMENT = "{alias}name || chr({id_sep}) || lpad({alias}category_id::text, {width}, '0')"

def _segment(alias: str = "") -> str:
    return _SEGMENT.format(alias=alias, id_sep=ord(ID_SEPARATOR), width=ID_PAD_WIDTH)

DROP_FUNCTION_SQL = f"DROP FUNCTION IF EXISTS {TREE_FUNCTION_NAME}()"

CREATE_FUNCTION_SQL = f"""
    CREATE FUNCTION {TREE_FUNCTION_NAME}()
    RETURNS TABLE (category_id INTEGER, name VARCHAR, parent_id INTEGER, level INTEGER, sort_path TEXT)
    LANGUAGE sql STABLE
    AS $$
        WITH RECURSIVE category_hierarchy AS (
            SELECT
                c.category_id,
                c.name,
                c.parent_id,
                c.level,
                ({_segment("c.")})::text AS sort_path
            FROM categories c
            WHERE c.parent_id IS NULL

            UNION ALL

            SELECT
                c.category_id,
                c.name,
                c.parent_id,
                c.level,
                ch.sort_path || chr({ord(SEGMENT_SEPARATOR)}) || {_segment("c.")}
            FROM categories c
            INNER JOIN category_hierarchy ch ON c.parent_id = ch.category_id
        )
        SELECT category_id, name, parent_id, level, sort_path
        FROM category_hierarchy
    $$
"""

TREE_QUERY = f"""
    SELECT category_id, name, parent_id, level
    FROM {TREE_FUNCTION_NAME}()
    ORDER BY sort_path COLLATE "C"
"""

async def install_tree_function(conn) -> None:
    """Replace the recursive function with the current definition"""
    async with conn.transaction():
        await conn.execute(DROP_FUNCTION_SQL)
        await conn.execute(CREATE_FUNCTION_SQL)
    logger.info(f"Function {TREE_FUNCTION_NAME}() installed")
