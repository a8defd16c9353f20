from pydantic import BaseModel, ConfigDict, field_validator

from .common import UTCDateTime, null_as_empty


class MultisigBase(BaseModel):
    multisig_address: str = ''
    name: str = ''
    description: str = ''

    coerce_null = field_validator('multisig_address', 'name', 'description', mode='before')(null_as_empty)


class MultisigCreate(MultisigBase):
    pass


class MultisigUpdate(BaseModel):
    multisig_address: str | None = None
    name: str | None = None
    description: str | None = None


class Multisig(MultisigBase):
    id: int
    created_at: UTCDateTime
    updated_at: UTCDateTime
    model_config = ConfigDict(from_attributes=True)
