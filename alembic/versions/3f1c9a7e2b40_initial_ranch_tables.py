"""initial ranch tables: animals, lots, farm_configs, transactions

Revision ID: 3f1c9a7e2b40
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7e2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'lots',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=1024), nullable=True),
        sa.Column('daily_cost', sa.Numeric(12, 4), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('farm_id', 'name', name='ux_lots_farm_name'),
    )
    op.create_index(op.f('ix_lots_farm_id'), 'lots', ['farm_id'], unique=False)

    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('ear_tag', sa.String(length=128), nullable=False),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('gender', sa.String(length=8), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('entry_date', sa.Date(), nullable=True),
        sa.Column('weight_kg', sa.Numeric(10, 3), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('purchase_value', sa.Numeric(14, 2), nullable=False),
        sa.Column('lot_id', sa.Uuid(), nullable=True),
        sa.Column('notes', sa.String(length=1024), nullable=True),
        sa.Column('history', sa.Text(), nullable=False),
        sa.Column('mother_id', sa.Uuid(), nullable=True),
        sa.Column('father_id', sa.Uuid(), nullable=True),
        sa.Column('sold_at', sa.Date(), nullable=True),
        sa.Column('death_date', sa.Date(), nullable=True),
        sa.Column('death_cause', sa.String(length=512), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('farm_id', 'ear_tag', name='ux_animals_farm_ear_tag'),
    )
    op.create_index(op.f('ix_animals_farm_id'), 'animals', ['farm_id'], unique=False)
    op.create_index(op.f('ix_animals_lot_id'), 'animals', ['lot_id'], unique=False)

    op.create_table(
        'farm_configs',
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('global_daily_cost', sa.Numeric(12, 4), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('farm_id'),
    )

    op.create_table(
        'transactions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('farm_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('description', sa.String(length=512), nullable=False),
        sa.Column('amount', sa.Numeric(14, 2), nullable=False),
        sa.Column('type', sa.String(length=16), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_transactions_farm_id'), 'transactions', ['farm_id'], unique=False)
    op.create_index(op.f('ix_transactions_date'), 'transactions', ['date'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_transactions_date'), table_name='transactions')
    op.drop_index(op.f('ix_transactions_farm_id'), table_name='transactions')
    op.drop_table('transactions')
    op.drop_table('farm_configs')
    op.drop_index(op.f('ix_animals_lot_id'), table_name='animals')
    op.drop_index(op.f('ix_animals_farm_id'), table_name='animals')
    op.drop_table('animals')
    op.drop_index(op.f('ix_lots_farm_id'), table_name='lots')
    op.drop_table('lots')
