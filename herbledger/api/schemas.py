"""
Contract response models.
"""

from pydantic import BaseModel, field_validator

OK = 200
ERROR = 500


class LedgerResponse(BaseModel):
    status: int
    payload: bytes = b""
    message: str = ""

    @field_validator('status')
    @classmethod
    def status_must_be_known(cls, v):
        if v not in (OK, ERROR):
            raise ValueError(f'status must be one of: {[OK, ERROR]}')
        return v

    @property
    def ok(self) -> bool:
        return self.status == OK

    @classmethod
    def success(cls, payload: bytes = None) -> "LedgerResponse":
        return cls(status=OK, payload=payload or b"")

    @classmethod
    def error(cls, message: str) -> "LedgerResponse":
        return cls(status=ERROR, message=message)
