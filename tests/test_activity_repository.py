"""
Redis activity repository tests.
Challenge: Check LPUSH/LTRIM/LRANGE usage against a small list-only stand-in for Redis.
"""

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from library.core.exceptions import StoreError
from library.repositories.activity_repository import RedisActivityRepository


class ListOnlyRedis:
    """Implements the three list commands the repository uses, with Redis index semantics."""

    def __init__(self, fail_on: set[str] | None = None):
        self.lists: dict[str, list[str]] = {}
        self.fail_on = fail_on or set()

    def _check(self, command: str):
        if command in self.fail_on:
            raise RedisConnectionError(f"{command} failed")

    async def lpush(self, key, value):
        self._check("lpush")
        self.lists.setdefault(key, []).insert(0, value)
        return len(self.lists[key])

    async def ltrim(self, key, start, end):
        self._check("ltrim")
        self.lists[key] = self.lists.get(key, [])[start:end + 1]
        return True

    async def lrange(self, key, start, end):
        self._check("lrange")
        return self.lists.get(key, [])[start:end + 1]


@pytest.mark.asyncio
async def test_keeps_last_n_most_recent_first():
    redis = ListOnlyRedis()
    repo = RedisActivityRepository(redis, max_actions=3)
    for i in range(4):
        await repo.save_action("alice", f"GET /books/{i}")

    activity = await repo.get_activity("alice")
    assert activity == ["GET /books/3", "GET /books/2", "GET /books/1"]
    assert "GET /books/0" not in activity


@pytest.mark.asyncio
async def test_key_per_user():
    redis = ListOnlyRedis()
    repo = RedisActivityRepository(redis)
    await repo.save_action("alice", "POST /books")
    assert list(redis.lists) == ["book_service_exercise:users:activities:alice"]
    assert await repo.get_activity("bob") == []


@pytest.mark.asyncio
async def test_unknown_user_has_empty_activity():
    assert await RedisActivityRepository(ListOnlyRedis()).get_activity("nobody") == []


@pytest.mark.asyncio
async def test_push_failure_raises():
    repo = RedisActivityRepository(ListOnlyRedis(fail_on={"lpush"}))
    with pytest.raises(StoreError, match="alice"):
        await repo.save_action("alice", "POST /books")


@pytest.mark.asyncio
async def test_trim_failure_is_logged_not_raised(caplog):
    redis = ListOnlyRedis(fail_on={"ltrim"})
    repo = RedisActivityRepository(redis, max_actions=1)
    await repo.save_action("alice", "POST /books")
    await repo.save_action("alice", "GET /books")

    # Untrimmed list may exceed the cap, reads still return at most N
    assert len(redis.lists["book_service_exercise:users:activities:alice"]) == 2
    assert await repo.get_activity("alice") == ["GET /books"]
    assert "error trimming actions for user alice" in caplog.text


@pytest.mark.asyncio
async def test_read_failure_raises():
    repo = RedisActivityRepository(ListOnlyRedis(fail_on={"lrange"}))
    with pytest.raises(StoreError):
        await repo.get_activity("alice")
