"""Wire format of the plans service API."""

from plans_client.wireformat.codec import (
    decode_authorization,
    decode_authorization_query,
    decode_authorization_request,
    decode_plan,
    decode_plan_active,
    decode_plan_details,
    decode_plans,
    decode_record,
    decode_record_list,
    decode_reseller_authorization_query,
    decode_reseller_authorization_request,
    decode_service_plan_response,
    decode_uuid_response,
    encode_record,
    to_wire,
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

__all__ = [
    "Authorization",
    "AuthorizationQuery",
    "AuthorizationRequest",
    "CharmPlanDetail",
    "Event",
    "Plan",
    "PlanActive",
    "PlanDetails",
    "ResellerAuthorizationQuery",
    "ResellerAuthorizationRequest",
    "ServicePlanResponse",
    "UUIDResponse",
    "decode_authorization",
    "decode_authorization_query",
    "decode_authorization_request",
    "decode_plan",
    "decode_plan_active",
    "decode_plan_details",
    "decode_plans",
    "decode_record",
    "decode_record_list",
    "decode_reseller_authorization_query",
    "decode_reseller_authorization_request",
    "decode_service_plan_response",
    "decode_uuid_response",
    "encode_record",
    "to_wire",
]
