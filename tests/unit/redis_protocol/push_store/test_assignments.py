import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from pushdb.exceptions import StoreUnavailableError
from pushdb.redis_protocol.push_store.assignments import AssignmentIndex
from pushdb.redis_protocol.push_store.errors import InvalidIdentifierError
from pushdb.redis_protocol.push_store.keys import PushKeyBuilder


@pytest.fixture
def index(primitive_store):
    return AssignmentIndex(primitive_store, key_builder=PushKeyBuilder())


@pytest.mark.asyncio
async def test_assignment_reflects_latest_write(index, fake_redis):
    assert await index.get_assigned_psp("app1", "d1") is None

    await index.set_assigned_psp("app1", "d1", "gcm-cred-1")
    assert await index.get_assigned_psp("app1", "d1") == "gcm-cred-1"
    assert fake_redis.dump_string("srv.dp-2-psp:app1:d1") == b"gcm-cred-1"

    await index.set_assigned_psp("app1", "d1", "gcm-cred-2")
    assert await index.get_assigned_psp("app1", "d1") == "gcm-cred-2"

    await index.clear_assigned_psp("app1", "d1")
    assert await index.get_assigned_psp("app1", "d1") is None


@pytest.mark.asyncio
async def test_clearing_absent_assignment_is_not_an_error(index):
    await index.clear_assigned_psp("app1", "never-assigned")

    assert await index.get_assigned_psp("app1", "never-assigned") is None


@pytest.mark.asyncio
async def test_assignments_are_scoped_by_service(index):
    await index.set_assigned_psp("app1", "d1", "apns-prod")
    await index.set_assigned_psp("app2", "d1", "apns-dev")

    assert await index.get_assigned_psp("app1", "d1") == "apns-prod"
    assert await index.get_assigned_psp("app2", "d1") == "apns-dev"


@pytest.mark.asyncio
async def test_set_assigned_psp_validates_service(index, fake_redis):
    with pytest.raises(InvalidIdentifierError):
        await index.set_assigned_psp("app:1", "d1", "gcm-cred-1")
    with pytest.raises(InvalidIdentifierError):
        await index.set_assigned_psp("app1", "d1", "")

    assert fake_redis.calls == []


@pytest.mark.asyncio
async def test_service_provider_set(index):
    assert await index.list_psp_names_for_service("app1") == []

    assert await index.add_psp_to_service("app1", "gcm-cred-1") is True
    assert await index.add_psp_to_service("app1", "apns-prod") is True
    assert await index.add_psp_to_service("app1", "apns-prod") is False
    assert sorted(await index.list_psp_names_for_service("app1")) == ["apns-prod", "gcm-cred-1"]

    assert await index.remove_psp_from_service("app1", "gcm-cred-1") is True
    assert await index.remove_psp_from_service("app1", "gcm-cred-1") is False
    assert await index.list_psp_names_for_service("app1") == ["apns-prod"]


@pytest.mark.asyncio
async def test_removing_provider_from_service_keeps_provider_record(index, fake_redis):
    await fake_redis.set("push.service.provider:gcm-cred-1", b"{}")
    await index.add_psp_to_service("app1", "gcm-cred-1")

    await index.remove_psp_from_service("app1", "gcm-cred-1")

    assert fake_redis.has_key("push.service.provider:gcm-cred-1")


@pytest.mark.asyncio
async def test_lookup_fault_is_raised_not_reported_as_absent(index, fake_redis):
    fake_redis.fail_on("get", RedisConnectionError("down"))

    with pytest.raises(StoreUnavailableError):
        await index.get_assigned_psp("app1", "d1")
