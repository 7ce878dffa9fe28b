import httpx
import pytest
from postgrest.exceptions import APIError

from conftest import make_query_client
from dairy_site.services.collections import CollectionError, NotFoundError


@pytest.mark.asyncio
async def test_list_applies_filters_order_and_limit():
    client, backend, query = make_query_client(data=[{"id": "1"}])

    rows = await client.list("blog_posts", order_by="created_at", ascending=False, filters={"published": True}, limit=3)

    assert rows == [{"id": "1"}]
    backend.table.assert_called_with("blog_posts")
    query.select.assert_called_with("*")
    query.eq.assert_called_with("published", True)
    query.order.assert_called_with("created_at", desc=True)
    query.limit.assert_called_with(3)


@pytest.mark.asyncio
async def test_list_empty_response():
    client, _, _ = make_query_client(data=None)
    assert await client.list("products") == []


@pytest.mark.asyncio
async def test_api_error_becomes_collection_error():
    client, _, _ = make_query_client(error=APIError({"message": "permission denied", "code": "42501"}))

    with pytest.raises(CollectionError) as excinfo:
        await client.list("products")

    assert excinfo.value.code == "42501"
    assert excinfo.value.message == "permission denied"
    assert not isinstance(excinfo.value, NotFoundError)


@pytest.mark.asyncio
async def test_get_one_missing_row():
    client, _, _ = make_query_client(error=APIError({"message": "no rows", "code": "PGRST116"}))
    with pytest.raises(NotFoundError):
        await client.get_one("products", "missing")


@pytest.mark.asyncio
async def test_get_single_no_rows_is_none():
    client, _, query = make_query_client(error=APIError({"message": "no rows", "code": "PGRST116"}))
    assert await client.get_single("site_settings") is None
    query.limit.assert_called_with(1)


@pytest.mark.asyncio
async def test_update_nothing_updated_raises_not_found():
    client, _, query = make_query_client(data=[])
    with pytest.raises(NotFoundError):
        await client.update("products", "missing", {"price": "1 DH"})
    query.eq.assert_called_with("id", "missing")


@pytest.mark.asyncio
async def test_remove_nothing_deleted_raises_not_found():
    client, _, _ = make_query_client(data=[])
    with pytest.raises(NotFoundError):
        await client.remove("products", "missing")


@pytest.mark.asyncio
async def test_insert_returns_created_row():
    client, _, query = make_query_client(data=[{"id": "new", "name_en": "Milk"}])
    row = await client.insert("products", {"name_en": "Milk"})
    assert row["id"] == "new"
    query.insert.assert_called_with({"name_en": "Milk"})


@pytest.mark.asyncio
async def test_count_uses_exact_count():
    client, _, query = make_query_client(data=[], count=7)
    assert await client.count("recipes") == 7
    query.select.assert_called_with("id", count="exact")


@pytest.mark.asyncio
async def test_rpc_returns_data():
    client, backend, _ = make_query_client(data=True)
    assert await client.rpc("set_active_row", {"table_name": "discounts", "target_id": "d1"}) is True
    backend.rpc.assert_called_with("set_active_row", {"table_name": "discounts", "target_id": "d1"})


@pytest.mark.asyncio
async def test_connection_failure_becomes_collection_error():
    client, _, _ = make_query_client(error=httpx.ConnectError("connection refused"))

    with pytest.raises(CollectionError) as excinfo:
        await client.list("products")

    assert excinfo.value.code is None
    assert "connection refused" in excinfo.value.message


@pytest.mark.asyncio
async def test_timeout_on_single_row_is_not_treated_as_no_rows():
    client, _, _ = make_query_client(error=httpx.ReadTimeout("timed out"))
    with pytest.raises(CollectionError):
        await client.get_single("site_settings")
