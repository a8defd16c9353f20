from sqlalchemy import Column, DateTime, Index, Integer, String

from .base import Base, now_utc


class Vault(Base):
    __tablename__ = 'vaults'
    __searchable__ = ()

    id = Column(Integer, primary_key=True, autoincrement=True)
    vault_address = Column(String(255), nullable=False, default='')
    # Advisory reference to Multisig.multisig_address; not a foreign key
    multisig_address = Column(String(255), nullable=False, default='')
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_vaults_multisig_address', 'multisig_address'),
        {'sqlite_autoincrement': True},
    )
