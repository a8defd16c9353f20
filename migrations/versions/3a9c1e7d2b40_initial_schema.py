"""Initial schema creation

Revision ID: 3a9c1e7d2b40
Revises: 
Create Date: 2026-10-19 09:12:31.418220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a9c1e7d2b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create multisigs, vaults and members."""
    # multisigs
    op.create_table(
        'multisigs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('multisig_address', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_multisigs_multisig_address', 'multisigs', ['multisig_address'])

    # vaults (multisig_address is advisory, no foreign key)
    op.create_table(
        'vaults',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('vault_address', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('multisig_address', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_vaults_multisig_address', 'vaults', ['multisig_address'])

    # members
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('member_address', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('name', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('multisig_address', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sqlite_autoincrement=True,
    )
    op.create_index('idx_members_multisig_address', 'members', ['multisig_address'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index('idx_members_multisig_address', table_name='members')
    op.drop_table('members')
    op.drop_index('idx_vaults_multisig_address', table_name='vaults')
    op.drop_table('vaults')
    op.drop_index('idx_multisigs_multisig_address', table_name='multisigs')
    op.drop_table('multisigs')
