from alembic import op
import sqlalchemy as sa

revision = '0001_create_rideshare_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'drivers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('vin', sa.String(), nullable=False),
        sa.Column('available', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('vin', name='uq_drivers_vin'),
    )

    op.create_table(
        'passengers',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'trips',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('driver_id', sa.Integer(), sa.ForeignKey('drivers.id', ondelete='SET NULL'), nullable=True),
        sa.Column('passenger_id', sa.Integer(), sa.ForeignKey('passengers.id', ondelete='SET NULL'), nullable=True),
        sa.Column('date', sa.DateTime(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_trips_driver_id', 'trips', ['driver_id'])
    op.create_index('ix_trips_passenger_id', 'trips', ['passenger_id'])

def downgrade() -> None:
    op.drop_index('ix_trips_passenger_id', table_name='trips')
    op.drop_index('ix_trips_driver_id', table_name='trips')
    op.drop_table('trips')
    op.drop_table('passengers')
    op.drop_table('drivers')
