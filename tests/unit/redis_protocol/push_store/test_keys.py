from pushdb.redis_protocol.push_store.keys import PushKeyBuilder


def test_key_layout():
    keys = PushKeyBuilder()

    assert keys.delivery_point("iphone-1") == "delivery.point:iphone-1"
    assert keys.push_service_provider("gcm-cred-1") == "push.service.provider:gcm-cred-1"
    assert keys.subscriber_delivery_points("app1", "alice") == "srv.sub-2-dp:app1:alice"
    assert keys.assigned_provider("app1", "d1") == "srv.dp-2-psp:app1:d1"
    assert keys.service_providers("app1") == "srv-2-psp:app1"
    assert keys.delivery_point_counter("iphone-1") == "delivery.point.counter:iphone-1"


def test_parse_subscriber_key():
    keys = PushKeyBuilder()

    assert keys.parse_subscriber_key("srv.sub-2-dp:app1:alice") == ("app1", "alice")
    assert keys.parse_subscriber_key("srv.sub-2-dp:app1") is None
    assert keys.parse_subscriber_key("srv-2-psp:app1") is None


def test_strip_prefix():
    keys = PushKeyBuilder()

    assert keys.strip_prefix("delivery.point.counter:d1", keys.counter_prefix) == "d1"
    assert keys.strip_prefix("other:d1", keys.counter_prefix) == "other:d1"
