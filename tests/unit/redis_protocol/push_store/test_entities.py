import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from pushdb.exceptions import StoreUnavailableError
from pushdb.redis_protocol.push_store.codec import JsonEntityCodec
from pushdb.redis_protocol.push_store.entities import EntityRepository
from pushdb.redis_protocol.push_store.errors import EntityDecodeError, InvalidIdentifierError
from pushdb.redis_protocol.push_store.keys import PushKeyBuilder


@pytest.fixture
def repository(primitive_store):
    return EntityRepository(primitive_store, key_builder=PushKeyBuilder(), codec=JsonEntityCodec())


@pytest.mark.asyncio
async def test_delivery_point_round_trip(repository, fake_redis, make_delivery_point):
    dp = make_delivery_point("iphone-1")

    await repository.set_delivery_point(dp)

    assert fake_redis.has_key("delivery.point:iphone-1")
    assert await repository.get_delivery_point("iphone-1") == dp


@pytest.mark.asyncio
async def test_missing_delivery_point_is_none(repository):
    assert await repository.get_delivery_point("nope") is None


@pytest.mark.asyncio
async def test_empty_record_is_treated_as_missing(repository, fake_redis):
    await fake_redis.set("delivery.point:blank", b"")

    assert await repository.get_delivery_point("blank") is None


@pytest.mark.asyncio
async def test_malformed_record_raises_decode_error(repository, fake_redis):
    await fake_redis.set("delivery.point:broken", b"{not json")

    with pytest.raises(EntityDecodeError):
        await repository.get_delivery_point("broken")


@pytest.mark.asyncio
async def test_store_fault_is_not_reported_as_missing(repository, fake_redis):
    fake_redis.fail_on("get", RedisConnectionError("down"))

    with pytest.raises(StoreUnavailableError):
        await repository.get_delivery_point("iphone-1")


@pytest.mark.asyncio
async def test_remove_delivery_point_is_idempotent(repository, make_delivery_point):
    await repository.set_delivery_point(make_delivery_point("d1"))

    await repository.remove_delivery_point("d1")
    await repository.remove_delivery_point("d1")

    assert await repository.get_delivery_point("d1") is None


@pytest.mark.asyncio
async def test_set_delivery_point_requires_name(repository, make_delivery_point):
    with pytest.raises(InvalidIdentifierError):
        await repository.set_delivery_point(make_delivery_point(""))


@pytest.mark.asyncio
async def test_mget_raw_delivery_points_preserves_order(repository, make_delivery_point):
    await repository.set_delivery_point(make_delivery_point("d1"))
    await repository.set_delivery_point(make_delivery_point("d3"))

    raw = await repository.mget_raw_delivery_points(["d3", "d2", "d1"])

    assert raw[1] is None
    assert JsonEntityCodec().decode_delivery_point(raw[0]).name == "d3"
    assert JsonEntityCodec().decode_delivery_point(raw[2]).name == "d1"


@pytest.mark.asyncio
async def test_push_service_provider_lifecycle(repository, fake_redis, make_push_service_provider):
    provider = make_push_service_provider("gcm-cred-1")

    await repository.set_push_service_provider(provider)
    assert fake_redis.has_key("push.service.provider:gcm-cred-1")
    assert await repository.get_push_service_provider("gcm-cred-1") == provider

    await repository.remove_push_service_provider("gcm-cred-1")
    assert await repository.get_push_service_provider("gcm-cred-1") is None


@pytest.mark.asyncio
async def test_custom_codec_is_used(primitive_store, make_delivery_point):
    class UpperCodec(JsonEntityCodec):
        def decode_delivery_point(self, payload):
            dp = super().decode_delivery_point(payload)
            dp.service_type = dp.service_type.upper()
            return dp

    repository = EntityRepository(primitive_store, key_builder=PushKeyBuilder(), codec=UpperCodec())
    await repository.set_delivery_point(make_delivery_point("d1"))

    assert (await repository.get_delivery_point("d1")).service_type == "APNS"
