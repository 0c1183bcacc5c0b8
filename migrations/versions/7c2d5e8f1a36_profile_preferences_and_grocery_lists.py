"""profile preferences and grocery lists

Revision ID: 7c2d5e8f1a36
Revises: 3a7c91d0e2b4
Create Date: 2026-10-19 15:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '7c2d5e8f1a36'
down_revision = '3a7c91d0e2b4'
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    # Cooking preferences used by plan matching, plus a manual calorie target kept across updates
    existing = {col['name'] for col in insp.get_columns('user_profiles')}
    if 'cooking_skill_level' not in existing:
        op.add_column('user_profiles', sa.Column('cooking_skill_level', sa.String(length=20), nullable=True))
    if 'time_available' not in existing:
        op.add_column('user_profiles', sa.Column('time_available', sa.Integer(), nullable=True))
    if 'budget_level' not in existing:
        op.add_column('user_profiles', sa.Column('budget_level', sa.String(length=10), nullable=True))
    if 'manual_calorie_target' not in existing:
        op.add_column('user_profiles', sa.Column('manual_calorie_target', sa.Integer(), nullable=True))

    if not insp.has_table('grocery_lists'):
        op.create_table(
            'grocery_lists',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.user_id'), nullable=False),
            sa.Column('meal_plan_id', sa.Integer(), sa.ForeignKey('meal_plans.id', ondelete='SET NULL'), nullable=True),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('items', sa.JSON(), nullable=False),
            sa.Column('estimated_cost', sa.Numeric(10, 2), nullable=True),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_grocery_lists_user_id', 'grocery_lists', ['user_id'])
        op.create_index('ix_grocery_lists_meal_plan_id', 'grocery_lists', ['meal_plan_id'])


def downgrade():
    op.drop_table('grocery_lists')

    op.drop_column('user_profiles', 'manual_calorie_target')
    op.drop_column('user_profiles', 'budget_level')
    op.drop_column('user_profiles', 'time_available')
    op.drop_column('user_profiles', 'cooking_skill_level')
