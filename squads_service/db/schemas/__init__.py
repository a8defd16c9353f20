"""
Domain-split Pydantic schemas.

Re-exports create/update/response shapes for every entity plus the shared
list, status and error models.
"""

from .common import ListParams, StatusResponse, ErrorResponse
from .multisigs import MultisigBase, MultisigCreate, MultisigUpdate, Multisig
from .vaults import VaultBase, VaultCreate, VaultUpdate, Vault
from .members import MemberBase, MemberCreate, MemberUpdate, Member

__all__ = [
    # Common
    "ListParams",
    "StatusResponse",
    "ErrorResponse",
    # Multisigs
    "MultisigBase",
    "MultisigCreate",
    "MultisigUpdate",
    "Multisig",
    # Vaults
    "VaultBase",
    "VaultCreate",
    "VaultUpdate",
    "Vault",
    # Members
    "MemberBase",
    "MemberCreate",
    "MemberUpdate",
    "Member",
]
