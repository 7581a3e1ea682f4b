import asyncpg
import pytest

from cattree.database.tree_function import TREE_QUERY
from cattree.exceptions import QueryExecutionError, StorageUnavailableError
from cattree.services.sql_category_tree_service import SqlCategoryTreeService
from conftest import FakeDatabase, category


@pytest.mark.asyncio
async def test_electronics_rows_in_server_order() -> None:
    db = FakeDatabase()
    db.tree_records = [
        category(1, "Electronics"),
        category(3, "Accessories", 1, 1),
        category(2, "Phones", 1, 1),
    ]

    rows = await SqlCategoryTreeService(db, prefetch=10, timeout=5).get_category_tree()

    assert [(r.name, r.level) for r in rows] == [
        ("Electronics", 0),
        ("Accessories", 1),
        ("Phones", 1),
    ]
    assert db.cursor_calls == [{"query": TREE_QUERY, "prefetch": 10, "timeout": 5}]
    assert db.transactions == [{"readonly": True}]


@pytest.mark.asyncio
async def test_rows_are_not_reordered() -> None:
    db = FakeDatabase()
    db.tree_records = [category(2, "Zeta"), category(1, "Alpha")]

    rows = await SqlCategoryTreeService(db).get_category_tree()

    assert [r.category_id for r in rows] == [2, 1]


@pytest.mark.asyncio
async def test_flat_rows_have_no_children() -> None:
    db = FakeDatabase()
    db.tree_records = [category(1, "Electronics"), category(2, "Phones", 1, 1)]

    rows = await SqlCategoryTreeService(db).get_category_tree()

    assert all(not hasattr(r, "children") for r in rows)


@pytest.mark.asyncio
async def test_extra_columns_are_ignored() -> None:
    db = FakeDatabase()
    db.tree_records = [dict(category(1, "Root"), sort_path="Root")]

    rows = await SqlCategoryTreeService(db).get_category_tree()

    assert [r.key for r in rows] == [(1, "Root", None, 0)]


@pytest.mark.asyncio
async def test_empty_table() -> None:
    db = FakeDatabase()
    db.tree_records = []

    assert await SqlCategoryTreeService(db).get_category_tree() == []


@pytest.mark.asyncio
async def test_missing_column_is_query_error() -> None:
    db = FakeDatabase()
    db.tree_records = [{"category_id": 1, "name": "Root", "parent_id": None}]

    with pytest.raises(QueryExecutionError, match="level"):
        await SqlCategoryTreeService(db).get_category_tree()


@pytest.mark.asyncio
async def test_server_error_is_query_error() -> None:
    db = FakeDatabase()
    db.tree_records = [category(1, "Root")]
    db.cursor_fail = asyncpg.exceptions.UndefinedFunctionError("function get_category_tree() does not exist")

    with pytest.raises(QueryExecutionError):
        await SqlCategoryTreeService(db).get_category_tree()


@pytest.mark.asyncio
async def test_connection_error_is_storage_unavailable() -> None:
    db = FakeDatabase()
    db.connect_fail = OSError("connection reset")

    with pytest.raises(StorageUnavailableError):
        await SqlCategoryTreeService(db).get_category_tree()
