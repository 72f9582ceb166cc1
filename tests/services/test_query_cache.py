# tests/services/test_query_cache.py

from unittest.mock import MagicMock

from redis.exceptions import ConnectionError as RedisConnectionError

from norwedfilm.services.query_cache import INVALIDATES, QueryCache, resources_for

from tests.utils.cache import FakeRedis


def test_key_format():
    assert QueryCache.key("projects", "all") == "nf:query:projects:all"
    assert QueryCache.key("blog", "list", 1, 12, None) == "nf:query:blog:list:1:12:"


def test_remember_loads_once():
    cache = QueryCache(FakeRedis(), ttl=60)
    loader = MagicMock(return_value=[{"id": 1}])

    assert cache.remember("nf:query:projects:all", loader) == [{"id": 1}]
    assert cache.remember("nf:query:projects:all", loader) == [{"id": 1}]
    loader.assert_called_once()
    assert cache.redis.ttls["nf:query:projects:all"] == 60


def test_invalidate_is_scoped_to_resource():
    cache = QueryCache(FakeRedis())
    cache.set(QueryCache.key("project", "emma-lars"), {"id": 1})
    cache.set(QueryCache.key("projects", "all"), [])
    cache.set(QueryCache.key("pages", "about"), {})

    cache.invalidate("project")

    assert sorted(cache.redis.store) == ["nf:query:pages:about", "nf:query:projects:all"]


def test_redis_errors_are_not_fatal():
    redis = MagicMock()
    redis.get.side_effect = RedisConnectionError("down")
    redis.setex.side_effect = RedisConnectionError("down")
    redis.scan_iter.side_effect = RedisConnectionError("down")
    cache = QueryCache(redis)

    assert cache.get("nf:query:projects:all") is None
    cache.set("nf:query:projects:all", [])
    cache.invalidate("projects")
    assert cache.remember("nf:query:projects:all", lambda: ["fresh"]) == ["fresh"]


def test_every_admin_resource_is_mapped():
    for resource in ("projects", "media", "contacts", "reviews", "subscribers", "bookings"):
        assert "stats" in resources_for(resource)
    assert set(resources_for("projects")) >= {"projects", "project", "project-media"}
    assert resources_for("unknown") == ()
    assert "cms-landing" in INVALIDATES["hero-slides"]
