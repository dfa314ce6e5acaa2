"""
Tests for the process-wide default client.
"""

import pytest

from query_pool import insert, select, set_client
from query_pool.errors import ClientNotConfiguredError
from query_pool.io.executor.registry import get_client, get_executor, reset_client


class TestSetClient:
    def test_set_and_get(self, fake_client):
        set_client(fake_client)
        assert get_client() is fake_client

    def test_last_write_wins(self, make_client):
        first, second = make_client(rows=[]), make_client(rows=[])

        set_client(first)
        set_client(second)

        assert get_client() is second

    def test_reset(self, fake_client):
        set_client(fake_client)
        reset_client()
        assert get_client() is None

    def test_get_executor_without_client(self):
        with pytest.raises(ClientNotConfiguredError, match="set_client"):
            get_executor()


class TestModuleLevelOperations:
    @pytest.mark.asyncio
    async def test_select_uses_current_client(self, fake_client):
        set_client(fake_client)

        rows = await select({"columns": ["column1", "column2"], "from": ["table1"]})

        assert rows == [{"id": 42}]
        assert fake_client.queries[0][0] == "SELECT column1,column2 FROM table1;"

    @pytest.mark.asyncio
    async def test_insert_uses_current_client(self, make_client):
        client = make_client(rows=[])
        set_client(client)

        await insert({"into": "t", "columns": ["a", "b"], "values": [1, 2]})

        assert client.queries == [("INSERT INTO t (a,b) VALUES ($1,$2);", (1, 2))]

    @pytest.mark.asyncio
    async def test_replacement_applies_to_later_calls(self, make_client):
        first, second = make_client(rows=[1]), make_client(rows=[2])

        set_client(first)
        assert await select({"from": "t"}) == [1]

        set_client(second)
        assert await select({"from": "t"}) == [2]
        assert len(first.queries) == 1

    @pytest.mark.asyncio
    async def test_select_without_client(self):
        with pytest.raises(ClientNotConfiguredError):
            await select({"from": "t"})
