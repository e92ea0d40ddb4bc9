"""JSON encoding and decoding of wire records.

Each record type has a table of WireField entries mapping wire names to
attributes, plus the RenamedField entries that apply to it. Decoding and
encoding are driven by those tables.

Decoding rules:
    - the payload must be a JSON object (or an array of objects for list
      endpoints)
    - unknown fields are ignored
    - absent or null fields keep the record default
    - a field present with the wrong JSON type is a WireDecodeError
"""

import json
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, TypeVar

from plans_client.errors import WireDecodeError
from plans_client.wireformat.compat import (
    AUTHORIZATION_RENAMES,
    RenamedField,
    WireSchema,
    decode_string,
    reconcile_renamed_fields,
)
from plans_client.wireformat.types import (
    Authorization,
    AuthorizationQuery,
    AuthorizationRequest,
    CharmPlanDetail,
    Event,
    Plan,
    PlanActive,
    PlanDetails,
    ResellerAuthorizationQuery,
    ResellerAuthorizationRequest,
    ServicePlanResponse,
    UUIDResponse,
)

R = TypeVar("R")

# Services may send up to nanosecond precision; datetime keeps microseconds
_FRACTION_RE = re.compile(r"\.(\d{6})\d+")


class FieldKind(ABC):
    """Conversion between a JSON value and an attribute value."""

    @abstractmethod
    def decode(self, value: object, *, where: str) -> Any: ...

    @abstractmethod
    def encode(self, value: Any, *, schema: WireSchema) -> object: ...


class StringKind(FieldKind):
    def decode(self, value: object, *, where: str) -> str:
        return decode_string(value, where=where)

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        return value


class BoolKind(FieldKind):
    def decode(self, value: object, *, where: str) -> bool:
        if not isinstance(value, bool):
            msg = f"cannot decode {where}: expected boolean, got {type(value).__name__}"
            raise WireDecodeError(msg)
        return value

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        return value


class TimestampKind(FieldKind):
    """RFC3339 timestamp."""

    def decode(self, value: object, *, where: str) -> datetime:
        text = decode_string(value, where=where)
        try:
            return datetime.fromisoformat(_FRACTION_RE.sub(r".\1", text))
        except ValueError as e:
            msg = f"cannot decode {where}: {text!r} is not an RFC3339 timestamp"
            raise WireDecodeError(msg) from e

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        text = value.isoformat()
        if value.utcoffset() == timedelta(0):
            return text.removesuffix("+00:00") + "Z"
        return text


@dataclass(frozen=True)
class RecordKind(FieldKind):
    """A nested record."""

    record_type: type

    def decode(self, value: object, *, where: str) -> Any:
        if not isinstance(value, Mapping):
            msg = f"cannot decode {where}: expected object, got {type(value).__name__}"
            raise WireDecodeError(msg)
        return _decode_mapping(self.record_type, value)

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        return to_wire(value, schema=schema)


@dataclass(frozen=True)
class SequenceKind(FieldKind):
    """A JSON array decoded into a tuple."""

    item: FieldKind

    def decode(self, value: object, *, where: str) -> tuple:
        if not isinstance(value, list):
            msg = f"cannot decode {where}: expected array, got {type(value).__name__}"
            raise WireDecodeError(msg)
        return tuple(
            self.item.decode(entry, where=f"{where}[{index}]") for index, entry in enumerate(value)
        )

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        return [self.item.encode(entry, schema=schema) for entry in value]


@dataclass(frozen=True)
class MappingKind(FieldKind):
    """A JSON object with arbitrary keys decoded into a dict."""

    item: FieldKind

    def decode(self, value: object, *, where: str) -> dict:
        if not isinstance(value, Mapping):
            msg = f"cannot decode {where}: expected object, got {type(value).__name__}"
            raise WireDecodeError(msg)
        return {
            str(key): self.item.decode(entry, where=f"{where}[{key!r}]")
            for key, entry in value.items()
        }

    def encode(self, value: Any, *, schema: WireSchema) -> object:
        return {key: self.item.encode(entry, schema=schema) for key, entry in value.items()}


STRING = StringKind()
BOOL = BoolKind()
TIMESTAMP = TimestampKind()


@dataclass(frozen=True)
class WireField:
    """One JSON member of a record.

    Attributes:
        name: Wire name
        attribute: Record attribute name
        kind: Value conversion
        omit_empty: Leave the member out of encoded output when empty
        embedded: The nested record shares the enclosing JSON object, so
            name is unused
    """

    name: str
    attribute: str
    kind: FieldKind = STRING
    omit_empty: bool = False
    embedded: bool = False


_EVENT = RecordKind(Event)

_RECORD_FIELDS: dict[type, tuple[WireField, ...]] = {
    Plan: (
        WireField("id", "id"),
        WireField("url", "url"),
        WireField("plan", "definition"),
        WireField("created-on", "created_on"),
        WireField("description", "description"),
        WireField("price", "price"),
        WireField("released", "released", BOOL),
        WireField("effective-time", "effective_time", TIMESTAMP, omit_empty=True),
    ),
    PlanActive: (
        WireField("", "plan", RecordKind(Plan), embedded=True),
        WireField("active", "active", BOOL),
    ),
    Event: (
        WireField("user", "user"),
        WireField("type", "type"),
        WireField("time", "time", TIMESTAMP),
    ),
    CharmPlanDetail: (
        WireField("charm", "charm_url"),
        WireField("attached", "attached", _EVENT),
        WireField("effective-since", "effective_since", TIMESTAMP, omit_empty=True),
        WireField("default", "default", BOOL),
        WireField("events", "events", SequenceKind(_EVENT)),
    ),
    PlanDetails: (
        WireField("plan", "plan", RecordKind(Plan)),
        WireField("created-event", "created", _EVENT),
        WireField("released-event", "released", _EVENT, omit_empty=True),
        WireField("charms", "charms", SequenceKind(RecordKind(CharmPlanDetail)), omit_empty=True),
    ),
    AuthorizationRequest: (
        WireField("charm-url", "charm_url"),
        WireField("plan-url", "plan_url"),
        WireField("budget", "budget"),
        WireField("limit", "limit"),
    ),
    Authorization: (
        WireField("authorization-id", "authorization_id"),
        WireField("user", "user"),
        WireField("plan", "plan_url"),
        WireField("charm-url", "charm_url"),
        WireField("created-on", "created_on", TIMESTAMP),
        WireField("credentials-id", "credentials_id"),
    ),
    AuthorizationQuery: (
        WireField("authorization-id", "authorization_id"),
        WireField("user", "user"),
        WireField("plan", "plan_url"),
        WireField("charm-url", "charm_url"),
    ),
    ResellerAuthorizationRequest: (
        WireField("reseller", "reseller"),
        WireField("charm-url", "charm_url"),
        WireField("plan-url", "plan_url"),
        WireField("budget", "budget"),
        WireField("limit", "limit"),
    ),
    ResellerAuthorizationQuery: (
        WireField("reseller", "reseller"),
        WireField("authorization-id", "authorization_id"),
        WireField("user", "user"),
        WireField("plan", "plan_url"),
        WireField("charm-url", "charm_url"),
    ),
    UUIDResponse: (WireField("uuid", "uuid"),),
    ServicePlanResponse: (
        WireField("current-plan", "current_plan"),
        WireField("available-plans", "available_plans", MappingKind(RecordKind(Plan))),
    ),
}

_RECORD_RENAMES: dict[type, tuple[RenamedField, ...]] = {
    AuthorizationRequest: AUTHORIZATION_RENAMES,
    Authorization: AUTHORIZATION_RENAMES,
    AuthorizationQuery: AUTHORIZATION_RENAMES,
    ResellerAuthorizationRequest: AUTHORIZATION_RENAMES,
    ResellerAuthorizationQuery: AUTHORIZATION_RENAMES,
}


def _fields_for(record_type: type) -> tuple[WireField, ...]:
    if record_type not in _RECORD_FIELDS:
        msg = f"{record_type.__name__} is not a wire record"
        raise TypeError(msg)
    return _RECORD_FIELDS[record_type]


def _decode_mapping(record_type: type[R], payload: Mapping[str, object]) -> R:
    record = record_type.__name__
    values: dict[str, Any] = {}
    for wire_field in _fields_for(record_type):
        if wire_field.embedded:
            values[wire_field.attribute] = wire_field.kind.decode(payload, where=record)
            continue
        value = payload.get(wire_field.name)
        if value is None:
            continue
        values[wire_field.attribute] = wire_field.kind.decode(
            value, where=f"{record}.{wire_field.name}"
        )
    renames = _RECORD_RENAMES.get(record_type, ())
    values.update(reconcile_renamed_fields(payload, renames, record=record))
    return record_type(**values)


def _load_json(raw: bytes | str, *, record: str) -> object:
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"cannot decode {record}: {e}"
        raise WireDecodeError(msg) from e


def decode_record(record_type: type[R], raw: bytes | str) -> R:
    """Decode a single JSON object into a wire record.

    Legacy and modern field names are both accepted and reconciled into the
    canonical attributes.

    Args:
        record_type: One of the record classes in wireformat.types
        raw: JSON document

    Returns:
        Decoded record

    Raises:
        WireDecodeError: On malformed JSON, a non-object document or a
            field of the wrong type
    """
    record = record_type.__name__
    payload = _load_json(raw, record=record)
    if not isinstance(payload, dict):
        msg = f"cannot decode {record}: expected object, got {type(payload).__name__}"
        raise WireDecodeError(msg)
    return _decode_mapping(record_type, payload)


def decode_record_list(record_type: type[R], raw: bytes | str) -> list[R]:
    """Decode a JSON array of objects; null decodes to an empty list.

    Raises:
        WireDecodeError: On malformed JSON, a non-array document or a bad entry
    """
    record = record_type.__name__
    payload = _load_json(raw, record=f"list of {record}")
    if payload is None:
        return []
    kind = SequenceKind(RecordKind(record_type))
    return list(kind.decode(payload, where=f"list of {record}"))


def to_wire(record: object, *, schema: WireSchema = "legacy") -> dict[str, object]:
    """Convert a record to a JSON-ready mapping.

    Args:
        record: Wire record instance
        schema: Spelling to use for renamed fields

    Returns:
        Mapping of wire names to JSON values
    """
    output: dict[str, object] = {}
    for wire_field in _fields_for(type(record)):
        value = getattr(record, wire_field.attribute)
        if value is None:
            continue
        if wire_field.omit_empty and not value:
            continue
        if wire_field.embedded:
            output.update(wire_field.kind.encode(value, schema=schema))
            continue
        output[wire_field.name] = wire_field.kind.encode(value, schema=schema)
    for renamed in _RECORD_RENAMES.get(type(record), ()):
        output[renamed.wire_name(schema)] = getattr(record, renamed.attribute)
    return output


def encode_record(record: object, *, schema: WireSchema = "legacy") -> bytes:
    """Encode a record as a JSON document.

    Legacy names are the canonical spelling; both service generations accept
    them. decode_record(type(r), encode_record(r)) == r for every record.
    """
    return json.dumps(to_wire(record, schema=schema)).encode("utf-8")


def decode_plan(raw: bytes | str) -> Plan:
    return decode_record(Plan, raw)


def decode_plans(raw: bytes | str) -> list[Plan]:
    return decode_record_list(Plan, raw)


def decode_plan_details(raw: bytes | str) -> PlanDetails:
    return decode_record(PlanDetails, raw)


def decode_authorization_request(raw: bytes | str) -> AuthorizationRequest:
    return decode_record(AuthorizationRequest, raw)


def decode_authorization(raw: bytes | str) -> Authorization:
    return decode_record(Authorization, raw)


def decode_authorization_query(raw: bytes | str) -> AuthorizationQuery:
    return decode_record(AuthorizationQuery, raw)


def decode_reseller_authorization_request(raw: bytes | str) -> ResellerAuthorizationRequest:
    return decode_record(ResellerAuthorizationRequest, raw)


def decode_reseller_authorization_query(raw: bytes | str) -> ResellerAuthorizationQuery:
    return decode_record(ResellerAuthorizationQuery, raw)


def decode_plan_active(raw: bytes | str) -> PlanActive:
    return decode_record(PlanActive, raw)


def decode_uuid_response(raw: bytes | str) -> UUIDResponse:
    return decode_record(UUIDResponse, raw)


def decode_service_plan_response(raw: bytes | str) -> ServicePlanResponse:
    return decode_record(ServicePlanResponse, raw)
