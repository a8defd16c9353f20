from sqlalchemy import Column, DateTime, Index, Integer, String, Text

from .base import Base, now_utc


class Multisig(Base):
    __tablename__ = 'multisigs'
    # Columns matched by the list endpoint's `q` parameter
    __searchable__ = ('name',)

    id = Column(Integer, primary_key=True, autoincrement=True)
    multisig_address = Column(String(255), nullable=False, default='')
    name = Column(String(255), nullable=False, default='')
    description = Column(Text, nullable=False, default='')
    created_at = Column(DateTime(timezone=True), default=now_utc)
    updated_at = Column(DateTime(timezone=True), default=now_utc, onupdate=now_utc)

    __table_args__ = (
        Index('idx_multisigs_multisig_address', 'multisig_address'),
        {'sqlite_autoincrement': True},
    )
