from pydantic import BaseModel, ConfigDict, field_validator

from .common import UTCDateTime, null_as_empty


class VaultBase(BaseModel):
    vault_address: str = ''
    multisig_address: str = ''

    coerce_null = field_validator('vault_address', 'multisig_address', mode='before')(null_as_empty)


class VaultCreate(VaultBase):
    pass


class VaultUpdate(BaseModel):
    vault_address: str | None = None
    multisig_address: str | None = None


class Vault(VaultBase):
    id: int
    created_at: UTCDateTime
    updated_at: UTCDateTime
    model_config = ConfigDict(from_attributes=True)
