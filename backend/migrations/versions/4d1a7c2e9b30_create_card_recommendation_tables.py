"""Create card catalog, wallet and analytics tables

Revision ID: 4d1a7c2e9b30
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4d1a7c2e9b30'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'cards',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('issuer', sa.String(length=255), nullable=False),
        sa.Column('network', sa.Enum('VISA', 'MASTERCARD', 'AMEX', 'DISCOVER', name='cardnetwork'), nullable=False),
        sa.Column('annual_fee', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('base_reward', sa.Numeric(precision=10, scale=4), nullable=False),
        sa.Column('reward_type', sa.Enum('POINTS', 'CASHBACK', 'MILES', name='rewardtype'), nullable=False),
        sa.Column('color', sa.String(length=16), nullable=True),
        sa.Column('gradient_start', sa.String(length=16), nullable=True),
        sa.Column('gradient_end', sa.String(length=16), nullable=True),
        sa.Column('logo_url', sa.String(length=512), nullable=True),
        sa.Column('signup_bonus', sa.String(length=255), nullable=True),
        sa.Column('signup_bonus_value', sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column('affiliate_url', sa.String(length=512), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('base_reward >= 0', name='ck_cards_base_reward_non_negative'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_cards_id'), 'cards', ['id'], unique=False)

    op.create_table(
        'card_rewards',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('card_id', sa.String(length=64), nullable=False),
        sa.Column('category', sa.String(length=64), nullable=False),
        sa.Column('multiplier', sa.Numeric(precision=10, scale=4), nullable=False),
        sa.Column('description', sa.String(length=512), nullable=False),
        sa.Column('mcc_codes', sa.String(length=512), nullable=True),
        sa.CheckConstraint('multiplier >= 0', name='ck_card_rewards_multiplier_non_negative'),
        sa.ForeignKeyConstraint(['card_id'], ['cards.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_card_rewards_id'), 'card_rewards', ['id'], unique=False)
    op.create_index(op.f('ix_card_rewards_card_id'), 'card_rewards', ['card_id'], unique=False)

    op.create_table(
        'user_wallets',
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('default_card_id', sa.String(length=64), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id')
    )
    op.create_index(op.f('ix_user_wallets_user_id'), 'user_wallets', ['user_id'], unique=False)

    op.create_table(
        'user_cards',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('card_id', sa.String(length=64), nullable=False),
        sa.Column('nickname', sa.String(length=255), nullable=True),
        sa.Column('added_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user_wallets.user_id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'card_id', name='uq_user_cards_user_card')
    )
    op.create_index(op.f('ix_user_cards_id'), 'user_cards', ['id'], unique=False)

    op.create_table(
        'analytics_events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.String(length=128), nullable=True),
        sa.Column('device_id', sa.String(length=128), nullable=True),
        sa.Column(
            'event_type',
            sa.Enum(
                'card_added', 'card_removed', 'upsell_tapped', 'apply_tapped',
                'notification_tapped', 'recommendation_shown',
                name='analyticseventtype',
            ),
            nullable=False,
        ),
        sa.Column('event_data', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_analytics_events_id'), 'analytics_events', ['id'], unique=False)
    op.create_index(op.f('ix_analytics_events_user_id'), 'analytics_events', ['user_id'], unique=False)


def downgrade() -> None:
    op.drop_index(op.f('ix_analytics_events_user_id'), table_name='analytics_events')
    op.drop_index(op.f('ix_analytics_events_id'), table_name='analytics_events')
    op.drop_table('analytics_events')
    op.drop_index(op.f('ix_user_cards_id'), table_name='user_cards')
    op.drop_table('user_cards')
    op.drop_index(op.f('ix_user_wallets_user_id'), table_name='user_wallets')
    op.drop_table('user_wallets')
    op.drop_index(op.f('ix_card_rewards_card_id'), table_name='card_rewards')
    op.drop_index(op.f('ix_card_rewards_id'), table_name='card_rewards')
    op.drop_table('card_rewards')
    op.drop_index(op.f('ix_cards_id'), table_name='cards')
    op.drop_table('cards')
