"""initial schema

Revision ID: 20261017_0001
Revises: 
Create Date: 2026-10-17
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20261017_0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('events',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('group_id', sa.String(), nullable=False, index=True),
        sa.Column('title', sa.String(), nullable=True),
        sa.Column('end_at', sa.DateTime(), nullable=False, index=True),
        sa.Column('review_duration_in_hours', sa.Float(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), nullable=False)
    )


def downgrade():
    op.drop_table('events')
