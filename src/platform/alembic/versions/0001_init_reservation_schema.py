"""init_reservation_schema

Revision ID: 0001
Revises:
Create Date: 2025-12-06

Schema:
- clients: booking parties, unique email
- reservations: [start_time, end_time) intervals on the single calendar
- no_overlapping_reservations: no two confirmed rows may overlap
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute('CREATE EXTENSION IF NOT EXISTS btree_gist')

    op.create_table(
        'clients',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('email', sa.Text(), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='clients_email_key'),
    )

    op.create_table(
        'reservations',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('client_id', UUID(as_uuid=True), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('status', sa.Text(), server_default='confirmed', nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(
            ['client_id'], ['clients.id'], name='reservations_client_id_fkey'
        ),
        sa.CheckConstraint('end_time > start_time', name='valid_time_range'),
        sa.CheckConstraint(
            "status IN ('confirmed', 'cancelled')", name='reservations_status_check'
        ),
    )

    # Only confirmed rows take part; a cancelled interval can be booked again
    op.execute(
        """
        ALTER TABLE reservations
        ADD CONSTRAINT no_overlapping_reservations
        EXCLUDE USING gist (tstzrange(start_time, end_time, '[)') WITH &&)
        WHERE (status = 'confirmed')
        """
    )

    op.create_index('idx_reservations_client_id', 'reservations', ['client_id'])
    op.create_index('idx_reservations_status', 'reservations', ['status'])
    op.execute(
        """
        CREATE INDEX idx_reservations_time_range
        ON reservations USING gist (tstzrange(start_time, end_time, '[)'))
        """
    )


def downgrade() -> None:
    op.drop_index('idx_reservations_time_range', table_name='reservations')
    op.drop_index('idx_reservations_status', table_name='reservations')
    op.drop_index('idx_reservations_client_id', table_name='reservations')
    op.drop_table('reservations')
    op.drop_table('clients')
