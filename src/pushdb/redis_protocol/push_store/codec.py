from __future__ import annotations

"""
Serialisation helpers for delivery point and push service provider payloads.

The repository never interprets payload bytes itself; it hands them to an
``EntityCodec``. ``JsonEntityCodec`` is the default implementation, and any
object with the same four methods can be injected in its place.
"""

from dataclasses import dataclass
from typing import Any, Dict, Protocol, Type, TypeVar, Union

import orjson

from ...data_models.push_entities import DeliveryPoint, PushServiceProvider
from .errors import EntityDecodeError

JsonLike = Union[str, bytes]
EntityT = TypeVar("EntityT", DeliveryPoint, PushServiceProvider)


class EntityCodec(Protocol):
    def encode_delivery_point(self, delivery_point: DeliveryPoint) -> bytes: ...

    def decode_delivery_point(self, payload: bytes) -> DeliveryPoint: ...

    def encode_push_service_provider(self, provider: PushServiceProvider) -> bytes: ...

    def decode_push_service_provider(self, payload: bytes) -> PushServiceProvider: ...


def _ensure_mapping(payload: JsonLike, kind: str) -> Dict[str, Any]:
    match payload:
        case bytes() | bytearray() | memoryview():
            raw = bytes(payload)
        case str():
            raw = payload.encode("utf-8")
        case _:
            raise EntityDecodeError(f"Unsupported {kind} payload type: {type(payload)!r}", kind=kind)

    try:
        data = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise EntityDecodeError(f"{kind} payload is not valid JSON", kind=kind) from exc
    if not isinstance(data, dict):
        raise EntityDecodeError(f"{kind} payload must be a JSON object", kind=kind)
    return data


def _string_map(data: Dict[str, Any], field_name: str, kind: str) -> Dict[str, str]:
    value = data.get(field_name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise EntityDecodeError(f"{kind} field {field_name!r} must be an object", kind=kind)
    for key, item in value.items():
        if not isinstance(item, str):
            raise EntityDecodeError(f"{kind} field {field_name}[{key!r}] must be a string", kind=kind)
    return dict(value)


def _decode_entity(payload: JsonLike, entity_cls: Type[EntityT]) -> EntityT:
    kind = entity_cls.__name__
    data = _ensure_mapping(payload, kind)
    for required in ("name", "service_type"):
        value = data.get(required)
        if not isinstance(value, str) or not value:
            raise EntityDecodeError(f"{kind} payload is missing {required!r}", kind=kind)
    return entity_cls(
        name=data["name"],
        service_type=data["service_type"],
        fixed_data=_string_map(data, "fixed_data", kind),
        volatile_data=_string_map(data, "volatile_data", kind),
    )


def _entity_to_payload(entity: DeliveryPoint | PushServiceProvider) -> Dict[str, Any]:
    return {
        "service_type": entity.service_type,
        "name": entity.name,
        "fixed_data": entity.fixed_data,
        "volatile_data": entity.volatile_data,
    }


@dataclass(frozen=True)
class JsonEntityCodec:
    """Encode and decode push entities as JSON for Redis storage."""

    def encode_delivery_point(self, delivery_point: DeliveryPoint) -> bytes:
        return orjson.dumps(_entity_to_payload(delivery_point))

    def decode_delivery_point(self, payload: JsonLike) -> DeliveryPoint:
        return _decode_entity(payload, DeliveryPoint)

    def encode_push_service_provider(self, provider: PushServiceProvider) -> bytes:
        return orjson.dumps(_entity_to_payload(provider))

    def decode_push_service_provider(self, payload: JsonLike) -> PushServiceProvider:
        return _decode_entity(payload, PushServiceProvider)


__all__ = ["EntityCodec", "JsonEntityCodec"]
