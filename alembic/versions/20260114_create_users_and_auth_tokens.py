"""create_users_and_auth_tokens

Revision ID: 3f9a1c2e7b41
Revises:
Create Date: 2026-01-14 12:00:00.000000

"""
from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '3f9a1c2e7b41'
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table('users',
        sa.Column('id', sa.String(length=36), nullable=False, comment='User ID (UUID)'),
        sa.Column('username', sa.String(length=50), nullable=False, comment='Unique username'),
        sa.Column('email', sa.String(length=255), nullable=False, comment='Unique email address'),
        sa.Column('password_hash', sa.String(length=255), nullable=False, comment='Hashed password (argon2id)'),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('image', sa.String(length=255), nullable=True),
        sa.Column('email_verified', sa.Boolean(), server_default=sa.false(), nullable=False, comment='Whether the email address has been verified'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_users_username'), ['username'], unique=True)
        batch_op.create_index(batch_op.f('ix_users_email'), ['email'], unique=True)

    op.create_table('auth_tokens',
        sa.Column('id', sa.String(length=36), nullable=False, comment='Token ID (UUID)'),
        sa.Column('user_id', sa.String(length=36), nullable=False, comment='Foreign key to users table'),
        sa.Column('token', sa.String(length=64), nullable=False, comment='Opaque token string'),
        sa.Column('token_type', sa.String(length=20), nullable=False, comment='email_verification or password_reset'),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False, comment='Timestamp when the token expires'),
        sa.Column('used_at', sa.DateTime(timezone=True), nullable=True, comment='Timestamp when the token was used'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False, comment='Timestamp when the token was created'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('auth_tokens', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_auth_tokens_token'), ['token'], unique=True)
        batch_op.create_index(batch_op.f('ix_auth_tokens_user_id'), ['user_id'], unique=False)
        batch_op.create_index(batch_op.f('ix_auth_tokens_expires_at'), ['expires_at'], unique=False)
        batch_op.create_index('ix_auth_tokens_user_type', ['user_id', 'token_type'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    with op.batch_alter_table('auth_tokens', schema=None) as batch_op:
        batch_op.drop_index('ix_auth_tokens_user_type')
        batch_op.drop_index(batch_op.f('ix_auth_tokens_expires_at'))
        batch_op.drop_index(batch_op.f('ix_auth_tokens_user_id'))
        batch_op.drop_index(batch_op.f('ix_auth_tokens_token'))

    op.drop_table('auth_tokens')

    with op.batch_alter_table('users', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_users_email'))
        batch_op.drop_index(batch_op.f('ix_users_username'))

    op.drop_table('users')
