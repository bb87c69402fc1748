"""Create session_tokens table

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'session_tokens',
        sa.Column('identifier', sa.String(length=64), nullable=False),
        sa.Column('verifier_hash', sa.String(length=64), nullable=False),
        sa.Column('expiration_datetime', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user_id', sa.String(length=255), nullable=False),
        sa.Column('details', sa.Text(), nullable=False, server_default=''),
        sa.PrimaryKeyConstraint('identifier')
    )
    op.create_index(op.f('ix_session_tokens_user_id'), 'session_tokens', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_session_tokens_user_id'), table_name='session_tokens')
    op.drop_table('session_tokens')
