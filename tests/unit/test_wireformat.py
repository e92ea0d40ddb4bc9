"""Tests for wire record decoding and encoding."""

import json
from datetime import UTC, datetime, timedelta, timezone

import pytest

from plans_client.errors import WireDecodeError
from plans_client.wireformat import (
    decode_authorization,
    decode_authorization_query,
    decode_authorization_request,
    decode_plan,
    decode_plan_active,
    decode_plan_details,
    decode_plans,
    decode_reseller_authorization_query,
    decode_reseller_authorization_request,
    decode_service_plan_response,
    decode_uuid_response,
    encode_record,
    to_wire,
)
from plans_client.wireformat.codec import decode_record
from plans_client.wireformat.types import (
    Authorization,
    AuthorizationQuery,
    AuthorizationRequest,
    Event,
    Plan,
    PlanActive,
    ResellerAuthorizationRequest,
    ServicePlanResponse,
    UUIDResponse,
)

_UUID = "fb3f5ad4-7b72-4a8e-a4e7-4c7f3d1d2e8a"

_LEGACY_REQUEST = {
    "env-uuid": _UUID,
    "charm-url": "cs:~bob/trusty/app-1",
    "service-name": "app",
    "plan-url": "bob/default",
    "budget": "personal",
    "limit": "100",
}


def _modern(payload: dict[str, object]) -> dict[str, object]:
    renamed = dict(payload)
    renamed["model-uuid"] = renamed.pop("env-uuid")
    renamed["application"] = renamed.pop("service-name")
    return renamed


def test_decode_plan() -> None:
    raw = json.dumps(
        {
            "id": "bob/default/3",
            "url": "bob/default",
            "plan": "metrics: {}",
            "created-on": "2016-05-01T10:00:00Z",
            "description": "free plan",
            "price": "nothing",
            "released": True,
            "effective-time": "2016-06-01T00:00:00.123456789Z",
        }
    )

    plan = decode_plan(raw)

    assert plan == Plan(
        id="bob/default/3",
        url="bob/default",
        definition="metrics: {}",
        created_on="2016-05-01T10:00:00Z",
        description="free plan",
        price="nothing",
        released=True,
        effective_time=datetime(2016, 6, 1, 0, 0, 0, 123456, tzinfo=UTC),
    )


def test_decode_plan_ignores_unknown_fields_and_nulls() -> None:
    plan = decode_plan(b'{"url": "bob/default", "colour": "blue", "price": null}')
    assert plan == Plan(url="bob/default")


def test_decode_plans_null_is_empty() -> None:
    assert decode_plans(b"null") == []


def test_decode_plans() -> None:
    plans = decode_plans(b'[{"id": "bob/a/1"}, {"id": "bob/b/2"}]')
    assert [plan.id for plan in plans] == ["bob/a/1", "bob/b/2"]


def test_decode_plans_requires_array() -> None:
    with pytest.raises(WireDecodeError, match="expected array"):
        decode_plans(b'{"id": "bob/a/1"}')


def test_decode_plan_requires_object() -> None:
    with pytest.raises(WireDecodeError, match="expected object, got list"):
        decode_plan(b"[]")


def test_decode_plan_malformed_json() -> None:
    with pytest.raises(WireDecodeError, match="cannot decode Plan"):
        decode_plan(b"{not json")


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ({"url": 3}, "Plan.url: expected string, got int"),
        ({"released": "yes"}, "Plan.released: expected boolean, got str"),
        ({"effective-time": "tomorrow"}, "Plan.effective-time"),
    ],
)
def test_decode_plan_wrong_type(payload: dict[str, object], message: str) -> None:
    with pytest.raises(WireDecodeError, match=message):
        decode_plan(json.dumps(payload))


def test_decode_plan_details() -> None:
    raw = json.dumps(
        {
            "plan": {"id": "bob/default/1", "url": "bob/default"},
            "created-event": {"user": "bob", "type": "create", "time": "2016-05-01T10:00:00Z"},
            "charms": [
                {
                    "charm": "cs:~bob/app-1",
                    "attached": {"user": "bob", "type": "attach", "time": "2016-05-02T10:00:00Z"},
                    "default": True,
                    "events": [
                        {"user": "alice", "type": "suspend", "time": "2016-05-03T10:00:00Z"}
                    ],
                }
            ],
        }
    )

    details = decode_plan_details(raw)

    assert details.plan.id == "bob/default/1"
    assert details.created == Event(
        user="bob", type="create", time=datetime(2016, 5, 1, 10, tzinfo=UTC)
    )
    assert details.released is None
    assert len(details.charms) == 1
    charm = details.charms[0]
    assert charm.charm_url == "cs:~bob/app-1"
    assert charm.default is True
    assert charm.effective_since is None
    assert [event.type for event in charm.events] == ["suspend"]


def test_decode_plan_details_bad_nested_entry() -> None:
    raw = b'{"charms": [{"charm": "cs:app", "events": [{"user": 1}]}]}'
    with pytest.raises(WireDecodeError, match=r"Event.user"):
        decode_plan_details(raw)


def test_legacy_and_modern_authorization_requests_are_identical() -> None:
    legacy = decode_authorization_request(json.dumps(_LEGACY_REQUEST))
    modern = decode_authorization_request(json.dumps(_modern(_LEGACY_REQUEST)))

    assert legacy == modern
    assert legacy == AuthorizationRequest(
        environment_uuid=_UUID,
        charm_url="cs:~bob/trusty/app-1",
        service_name="app",
        plan_url="bob/default",
        budget="personal",
        limit="100",
    )


def test_mixed_schema_authorization_request() -> None:
    payload = {"env-uuid": "X", "application": "Y", "plan-url": "bob/default"}

    request = decode_authorization_request(json.dumps(payload))

    assert request.environment_uuid == "X"
    assert request.service_name == "Y"


def test_legacy_name_wins_when_both_are_present() -> None:
    payload = {
        "env-uuid": "legacy",
        "model-uuid": "modern",
        "service-name": "",
        "application": "app",
    }

    request = decode_authorization_request(json.dumps(payload))

    assert request.environment_uuid == "legacy"
    assert request.service_name == "app"


def test_renamed_field_wrong_type_is_rejected() -> None:
    with pytest.raises(WireDecodeError, match="AuthorizationRequest.model-uuid"):
        decode_authorization_request(b'{"env-uuid": "X", "model-uuid": 7}')


def test_authorization_request_reencode_is_identical() -> None:
    request = decode_authorization_request(json.dumps(_modern(_LEGACY_REQUEST)))

    encoded = encode_record(request)

    assert json.loads(encoded) == _LEGACY_REQUEST
    assert decode_authorization_request(encoded) == request


def test_modern_schema_encoding() -> None:
    request = decode_authorization_request(json.dumps(_LEGACY_REQUEST))

    wire = to_wire(request, schema="modern")

    assert wire == _modern(_LEGACY_REQUEST)
    assert decode_authorization_request(json.dumps(wire)) == request


def test_decode_authorization() -> None:
    payload = {
        "authorization-id": "auth-1",
        "user": "bob",
        "plan": "bob/default",
        "model-uuid": _UUID,
        "charm-url": "cs:app",
        "application": "app",
        "created-on": "2016-05-01T10:00:00+02:00",
        "credentials-id": "cred-1",
    }

    authorization = decode_authorization(json.dumps(payload))

    assert authorization == Authorization(
        authorization_id="auth-1",
        user="bob",
        plan_url="bob/default",
        environment_uuid=_UUID,
        charm_url="cs:app",
        service_name="app",
        created_on=datetime(2016, 5, 1, 10, tzinfo=timezone(timedelta(hours=2))),
        credentials_id="cred-1",
    )
    assert decode_authorization(encode_record(authorization)) == authorization


def test_decode_authorization_query_both_generations() -> None:
    legacy = decode_authorization_query(b'{"user": "bob", "env-uuid": "X", "service-name": "app"}')
    modern = decode_authorization_query(b'{"user": "bob", "model-uuid": "X", "application": "app"}')

    expected = AuthorizationQuery(user="bob", environment_uuid="X", service_name="app")
    assert legacy == modern == expected


def test_reseller_records_share_renames() -> None:
    request = decode_reseller_authorization_request(
        b'{"reseller": "acme", "model-uuid": "X", "service-name": "app"}'
    )
    query = decode_reseller_authorization_query(b'{"reseller": "acme", "application": "app"}')

    assert request == ResellerAuthorizationRequest(
        reseller="acme", environment_uuid="X", service_name="app"
    )
    assert query.reseller == "acme"
    assert query.service_name == "app"


def test_to_wire_omits_empty_optional_fields() -> None:
    wire = to_wire(Plan(url="bob/default", definition="metrics: {}"))

    assert wire == {
        "id": "",
        "url": "bob/default",
        "plan": "metrics: {}",
        "created-on": "",
        "description": "",
        "price": "",
        "released": False,
    }


def test_utc_timestamps_encode_with_z_suffix() -> None:
    plan = Plan(effective_time=datetime(2016, 6, 1, 12, 30, tzinfo=UTC))
    assert to_wire(plan)["effective-time"] == "2016-06-01T12:30:00Z"


def test_decode_record_rejects_non_records() -> None:
    with pytest.raises(TypeError, match="dict is not a wire record"):
        decode_record(dict, b"{}")


def test_decode_plan_active_shares_the_plan_object() -> None:
    raw = b'{"id": "bob/default/1", "url": "bob/default", "plan": "metrics: {}", "active": true}'

    plan_active = decode_plan_active(raw)

    assert plan_active == PlanActive(
        plan=Plan(id="bob/default/1", url="bob/default", definition="metrics: {}"),
        active=True,
    )
    wire = to_wire(plan_active)
    assert wire["active"] is True
    assert wire["url"] == "bob/default"
    assert wire["plan"] == "metrics: {}"
    assert decode_plan_active(encode_record(plan_active)) == plan_active


def test_decode_plan_active_wrong_type() -> None:
    with pytest.raises(WireDecodeError, match="PlanActive.active"):
        decode_plan_active(b'{"active": "yes"}')


def test_decode_uuid_response() -> None:
    assert decode_uuid_response(b'{"uuid": "abc"}') == UUIDResponse(uuid="abc")


def test_decode_service_plan_response() -> None:
    raw = json.dumps(
        {
            "current-plan": "bob/default",
            "available-plans": {
                "bob/default": {"url": "bob/default", "released": True},
                "bob/premium": {"url": "bob/premium"},
            },
        }
    )

    response = decode_service_plan_response(raw)

    assert response == ServicePlanResponse(
        current_plan="bob/default",
        available_plans={
            "bob/default": Plan(url="bob/default", released=True),
            "bob/premium": Plan(url="bob/premium"),
        },
    )
    assert decode_service_plan_response(encode_record(response)) == response


def test_decode_service_plan_response_bad_entry() -> None:
    with pytest.raises(WireDecodeError, match="expected object, got list"):
        decode_service_plan_response(b'{"available-plans": []}')
