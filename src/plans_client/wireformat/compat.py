"""Compatibility with field names renamed across service generations.

Older services send "env-uuid" and "service-name"; newer ones send
"model-uuid" and "application" for the same values. Each rename is described
once as a RenamedField and applied by reconcile_renamed_fields, so records
never carry their own precedence logic.

Both names are read as independent JSON targets and type checked separately.
The legacy value wins when it is non-empty, otherwise the modern value is
used. Precedence is decided per field, so a payload may mix generations.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from plans_client.errors import WireDecodeError

WireSchema = Literal["legacy", "modern"]


@dataclass(frozen=True)
class RenamedField:
    """A record field whose wire name changed between service generations.

    Attributes:
        legacy: Wire name used by older services
        modern: Wire name used by newer services
        attribute: Name of the canonical record attribute
    """

    legacy: str
    modern: str
    attribute: str

    def wire_name(self, schema: WireSchema) -> str:
        if schema == "modern":
            return self.modern
        return self.legacy


MODEL_UUID = RenamedField(legacy="env-uuid", modern="model-uuid", attribute="environment_uuid")
APPLICATION = RenamedField(legacy="service-name", modern="application", attribute="service_name")

# Renames shared by every authorization record and its reseller variants
AUTHORIZATION_RENAMES: tuple[RenamedField, ...] = (MODEL_UUID, APPLICATION)


def decode_string(value: object, *, where: str) -> str:
    """Decode a JSON string field; null decodes to the empty string.

    Raises:
        WireDecodeError: If the value is neither a string nor null
    """
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"cannot decode {where}: expected string, got {type(value).__name__}"
        raise WireDecodeError(msg)
    return value


def reconcile_renamed_fields(
    payload: Mapping[str, object],
    renames: tuple[RenamedField, ...],
    *,
    record: str,
) -> dict[str, str]:
    """Collapse legacy and modern spellings into canonical attribute values.

    Args:
        payload: Decoded JSON object
        renames: Renamed fields that apply to the record
        record: Record name, used in error messages

    Returns:
        Mapping of canonical attribute name to reconciled value

    Raises:
        WireDecodeError: If either spelling is present with a non-string value
    """
    values: dict[str, str] = {}
    for renamed in renames:
        legacy = decode_string(payload.get(renamed.legacy), where=f"{record}.{renamed.legacy}")
        modern = decode_string(payload.get(renamed.modern), where=f"{record}.{renamed.modern}")
        values[renamed.attribute] = legacy if legacy else modern
    return values
