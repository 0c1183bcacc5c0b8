"""initial meal planning models

Revision ID: 3a7c91d0e2b4
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c91d0e2b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    if not insp.has_table('user_profiles'):
        op.create_table(
            'user_profiles',
            sa.Column('user_id', sa.Integer(), primary_key=True, autoincrement=False),
            sa.Column('age', sa.Integer(), nullable=True),
            sa.Column('weight_kg', sa.Numeric(6, 2), nullable=True),
            sa.Column('height_cm', sa.Numeric(6, 2), nullable=True),
            sa.Column('gender', sa.String(length=10), nullable=True),
            sa.Column('activity_level', sa.String(length=20), nullable=True),
            sa.Column('goal', sa.String(length=20), nullable=False, server_default='balanced'),
            sa.Column('dietary_preference', sa.String(length=20), nullable=False, server_default='omnivore'),
            sa.Column('allergies', sa.JSON(), nullable=True),
            sa.Column('tdee', sa.Integer(), nullable=True),
            sa.Column('daily_calorie_target', sa.Integer(), nullable=True),
            sa.Column('target_protein', sa.Integer(), nullable=True),
            sa.Column('target_carbs', sa.Integer(), nullable=True),
            sa.Column('target_fats', sa.Integer(), nullable=True),
            sa.Column('locale', sa.String(length=5), nullable=False, server_default='en'),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )

    if not insp.has_table('meals'):
        op.create_table(
            'meals',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), nullable=True),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('meal_type', sa.String(length=20), nullable=False),
            sa.Column('cuisine_type', sa.String(length=30), nullable=True),
            sa.Column('difficulty_level', sa.String(length=20), nullable=True),
            sa.Column('prep_time', sa.Integer(), nullable=True),
            sa.Column('cook_time', sa.Integer(), nullable=True),
            sa.Column('servings', sa.Integer(), nullable=False, server_default='1'),
            sa.Column('calories_per_serving', sa.Integer(), nullable=True),
            sa.Column('protein_per_serving', sa.Numeric(8, 2), nullable=True),
            sa.Column('carbs_per_serving', sa.Numeric(8, 2), nullable=True),
            sa.Column('fats_per_serving', sa.Numeric(8, 2), nullable=True),
            sa.Column('ingredients', sa.JSON(), nullable=True),
            sa.Column('instructions', sa.JSON(), nullable=True),
            sa.Column('dietary_tags', sa.JSON(), nullable=True),
            sa.Column('tags', sa.JSON(), nullable=True),
            sa.Column('locale', sa.String(length=5), nullable=False, server_default='en'),
            sa.Column('is_seed_meal', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('is_ai_generated', sa.Boolean(), nullable=False, server_default=sa.false()),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
            sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_meals_user_id', 'meals', ['user_id'])
        op.create_index('ix_meals_meal_type', 'meals', ['meal_type'])
        op.create_index('ix_meals_locale', 'meals', ['locale'])
        op.create_index('ix_meals_is_seed_meal', 'meals', ['is_seed_meal'])

    if not insp.has_table('meal_plans'):
        op.create_table(
            'meal_plans',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('user_id', sa.Integer(), sa.ForeignKey('user_profiles.user_id'), nullable=False),
            sa.Column('name', sa.String(length=100), nullable=False),
            sa.Column('type', sa.String(length=10), nullable=False, server_default='weekly'),
            sa.Column('start_date', sa.Date(), nullable=True),
            sa.Column('end_date', sa.Date(), nullable=True),
            sa.Column('total_calories', sa.Integer(), nullable=False, server_default='0'),
            sa.Column('total_protein', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('total_carbs', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('total_fats', sa.Numeric(10, 2), nullable=False, server_default='0'),
            sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        )
        op.create_index('ix_meal_plans_user_id', 'meal_plans', ['user_id'])

    if not insp.has_table('meal_plan_items'):
        op.create_table(
            'meal_plan_items',
            sa.Column('id', sa.Integer(), primary_key=True),
            sa.Column('meal_plan_id', sa.Integer(), sa.ForeignKey('meal_plans.id', ondelete='CASCADE'), nullable=False),
            sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id'), nullable=False),
            sa.Column('day_of_week', sa.Integer(), nullable=False),
            sa.Column('meal_time', sa.String(length=20), nullable=False),
            sa.Column('servings', sa.Integer(), nullable=False, server_default='1'),
            sa.Column('is_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        )
        op.create_index('ix_meal_plan_items_meal_plan_id', 'meal_plan_items', ['meal_plan_id'])


def downgrade():
    op.drop_table('meal_plan_items')
    op.drop_table('meal_plans')
    op.drop_table('meals')
    op.drop_table('user_profiles')
