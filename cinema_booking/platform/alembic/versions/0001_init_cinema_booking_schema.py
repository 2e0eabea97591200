"""init_cinema_booking_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- cinema_hall: Halls of a cinema
- seat: Every grid cell of a hall (gaps included) with its booking coordinates
- movie_session: Screening of a movie in a hall, with base price and currency
- movie_session_multi_factor: Per-session price multiplier per seat type
- booking: Booking records
- seat_on_booking: Seats of a booking; UNIQUE(movie_session_id, seat_id)
  makes the store reject double-booking of a seat for one session
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables with final schema."""

    op.create_table(
        'cinema_hall',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cinema_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_cinema_hall_cinema_id'), 'cinema_hall', ['cinema_id'])

    op.create_table(
        'seat',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cinema_hall_id', sa.Integer(), nullable=False),
        sa.Column('row', sa.Integer(), nullable=False),
        sa.Column('col', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('booking_row', sa.Integer(), nullable=True),
        sa.Column('booking_col', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['cinema_hall_id'], ['cinema_hall.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cinema_hall_id', 'row', 'col', name='uq_seat_hall_grid_position'),
        sa.UniqueConstraint(
            'cinema_hall_id', 'booking_row', 'booking_col', name='uq_seat_hall_booking_position'
        ),
    )
    op.create_index(op.f('ix_seat_cinema_hall_id'), 'seat', ['cinema_hall_id'])

    op.create_table(
        'movie_session',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('cinema_hall_id', sa.Integer(), nullable=False),
        sa.Column('movie_id', sa.Integer(), nullable=True),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=True),
        sa.Column('base_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.ForeignKeyConstraint(['cinema_hall_id'], ['cinema_hall.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_movie_session_cinema_hall_id'), 'movie_session', ['cinema_hall_id'])

    op.create_table(
        'movie_session_multi_factor',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('movie_session_id', sa.Integer(), nullable=False),
        sa.Column('type_seat', sa.String(length=20), nullable=False),
        sa.Column('price_factor', sa.Numeric(precision=6, scale=3), nullable=False),
        sa.ForeignKeyConstraint(['movie_session_id'], ['movie_session.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('movie_session_id', 'type_seat', name='uq_multi_factor_session_type'),
    )
    op.create_index(
        op.f('ix_movie_session_multi_factor_movie_session_id'),
        'movie_session_multi_factor',
        ['movie_session_id'],
    )

    op.create_table(
        'booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('movie_session_id', sa.Integer(), nullable=False),
        sa.Column('total_price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('currency', sa.String(length=3), nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            server_default=sa.text('now()'),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(['movie_session_id'], ['movie_session.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_booking_user_id'), 'booking', ['user_id'])
    op.create_index(op.f('ix_booking_movie_session_id'), 'booking', ['movie_session_id'])

    op.create_table(
        'seat_on_booking',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('seat_id', sa.Integer(), nullable=False),
        sa.Column('movie_session_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['booking_id'], ['booking.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['seat_id'], ['seat.id']),
        sa.ForeignKeyConstraint(['movie_session_id'], ['movie_session.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('movie_session_id', 'seat_id', name='uq_seat_on_booking_session_seat'),
    )
    op.create_index(op.f('ix_seat_on_booking_booking_id'), 'seat_on_booking', ['booking_id'])


def downgrade() -> None:
    op.drop_table('seat_on_booking')
    op.drop_table('booking')
    op.drop_table('movie_session_multi_factor')
    op.drop_table('movie_session')
    op.drop_table('seat')
    op.drop_table('cinema_hall')
