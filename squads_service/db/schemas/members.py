from pydantic import BaseModel, ConfigDict, field_validator

from .common import UTCDateTime, null_as_empty


class MemberBase(BaseModel):
    member_address: str = ''
    name: str = ''
    multisig_address: str = ''

    coerce_null = field_validator('member_address', 'name', 'multisig_address', mode='before')(null_as_empty)


class MemberCreate(MemberBase):
    pass


class MemberUpdate(BaseModel):
    member_address: str | None = None
    name: str | None = None
    multisig_address: str | None = None


class Member(MemberBase):
    id: int
    created_at: UTCDateTime
    updated_at: UTCDateTime
    model_config = ConfigDict(from_attributes=True)
