"""
Domain-split SQLAlchemy models.

Exposes `Base`, `now_utc`, and the ORM classes for multisigs, vaults and
members.
"""

from .base import Base, now_utc  # re-export

from .multisigs import Multisig
from .vaults import Vault
from .members import Member

__all__ = [
    # base
    "Base",
    "now_utc",
    # entities
    "Multisig",
    "Vault",
    "Member",
]
