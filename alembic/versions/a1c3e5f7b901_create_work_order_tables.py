"""create work order tables

Revision ID: a1c3e5f7b901
Revises:
Create Date: 2025-08-04 09:12:41.502318

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'a1c3e5f7b901'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 工单表
    op.create_table('work_orders',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('work_order_number', sa.String(length=32), nullable=False),
        sa.Column('job_number', sa.String(length=64), nullable=True),
        sa.Column('job_name', sa.String(length=255), nullable=True),
        sa.Column('job_pm', sa.String(length=255), nullable=True),
        sa.Column('job_address', sa.String(length=255), nullable=True),
        sa.Column('job_superintendent', sa.String(length=255), nullable=True),
        sa.Column('division', sa.String(length=64), nullable=True),
        sa.Column('system', sa.String(length=64), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('date_issued', sa.Date(), nullable=True),
        sa.Column('material_delivery_date', sa.Date(), nullable=True),
        sa.Column('requested_completion_dates', sa.JSON(), nullable=False),
        sa.Column('completion_date', sa.Date(), nullable=True),
        sa.Column('completion_varies', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='Draft'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('work_order_number', name='uq_work_orders_work_order_number'),
    )
    op.create_index('ix_work_orders_work_order_number', 'work_orders', ['work_order_number'])
    op.create_index('ix_work_orders_status', 'work_orders', ['status'])

    # 工单明细表
    op.create_table('work_order_items',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('work_order_id', sa.String(length=32), nullable=False),
        sa.Column('seq', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=32), nullable=True),
        sa.Column('scope', sa.String(length=32), nullable=True),
        sa.Column('elevation', sa.String(length=255), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(length=32), nullable=False, server_default='In Progress'),
        sa.Column('hold_reason', sa.String(length=64), nullable=True),
        sa.ForeignKeyConstraint(['work_order_id'], ['work_orders.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_work_order_items_work_order_id', 'work_order_items', ['work_order_id'])

    # 明细完工日期表
    op.create_table('work_order_item_completion_dates',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('item_id', sa.String(length=32), nullable=False),
        sa.Column('seq', sa.Integer(), nullable=False),
        sa.Column('completion_date', sa.Date(), nullable=False),
        sa.ForeignKeyConstraint(['item_id'], ['work_order_items.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_work_order_item_completion_dates_item_id', 'work_order_item_completion_dates', ['item_id'])


def downgrade():
    op.drop_index('ix_work_order_item_completion_dates_item_id', table_name='work_order_item_completion_dates')
    op.drop_table('work_order_item_completion_dates')
    op.drop_index('ix_work_order_items_work_order_id', table_name='work_order_items')
    op.drop_table('work_order_items')
    op.drop_index('ix_work_orders_status', table_name='work_orders')
    op.drop_index('ix_work_orders_work_order_number', table_name='work_orders')
    op.drop_table('work_orders')
