"""
Record codec - herb batch provenance record and its stored JSON form.
Six fixed string fields; the layout is unversioned.
"""

import json

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import DecodeFailure


class HerbRecord(BaseModel):
    """Provenance state of one herb batch."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    family: str = ""
    location: str = ""
    production: str = ""
    holder: str = ""
    timestamp: str = ""

    @field_validator('name', 'family', 'location', 'production', 'holder', 'timestamp', mode='before')
    @classmethod
    def null_is_empty(cls, v):
        return "" if v is None else v


def encode_record(record: HerbRecord) -> bytes:
    """Serialize a record to compact JSON with all six fields in schema order."""
    return record.model_dump_json().encode("utf-8")


def decode_record(payload: bytes) -> HerbRecord:
    """Parse stored bytes into a record.

    Unknown members are ignored; missing or null members default to empty
    strings. Raises DecodeFailure when the payload is not a JSON object of
    string fields.
    """
    try:
        return HerbRecord.model_validate_json(payload)
    except ValidationError as e:
        raise DecodeFailure(
            f"Malformed herb record: {e.error_count()} validation error(s)",
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from e


def salvage_record(payload: bytes) -> HerbRecord:
    """Recover the string-valued fields of a payload decode_record rejects.

    Members of the wrong type are dropped; a payload that is not a JSON
    object yields a blank record.
    """
    try:
        document = json.loads(payload)
    except ValueError:
        return HerbRecord()
    if not isinstance(document, dict):
        return HerbRecord()

    return HerbRecord(**{
        k: v for k, v in document.items()
        if k in HerbRecord.model_fields and isinstance(v, str)
    })
