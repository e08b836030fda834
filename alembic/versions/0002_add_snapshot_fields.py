from alembic import op
import sqlalchemy as sa

revision = '0002_add_snapshot_fields'
down_revision = '0001_init'
branch_labels = None
depends_on = None

def upgrade():
    op.add_column('orders', sa.Column('customer_name_snapshot', sa.String(200), nullable=True))
    op.add_column('orders', sa.Column('item_name_snapshot', sa.String(200), nullable=True))

def downgrade():
    op.drop_column('orders', 'item_name_snapshot')
    op.drop_column('orders', 'customer_name_snapshot')
