"""create category / sub_category / course tables

Revision ID: c47a90e3b812
Revises: 8f2d4a6e51c0
Create Date: 2026-10-19 11:02:17.904551

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c47a90e3b812'
down_revision: Union[str, Sequence[str], None] = '8f2d4a6e51c0'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_categories_deleted_at', 'categories', ['deleted_at'])

    op.create_table(
        'sub_categories',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_sub_categories_deleted_at', 'sub_categories', ['deleted_at'])

    op.create_table(
        'courses',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('teacher_id', sa.Uuid(), nullable=False),
        sa.Column('category_id', sa.Uuid(), nullable=False),
        sa.Column('sub_category_id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('subtitle', sa.String(length=255), nullable=False),
        sa.Column('topic', sa.String(length=100), nullable=False),
        sa.Column('language', sa.String(length=50), nullable=False),
        sa.Column('subtitle_languages', sa.JSON(), nullable=False),
        sa.Column('level', sa.Enum('BEGINNER', 'INTERMEDIATE', 'ADVANCED', name='course_level'), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['teacher_id'], ['users.id']),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.ForeignKeyConstraint(['sub_category_id'], ['sub_categories.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_courses_teacher_id', 'courses', ['teacher_id'])
    op.create_index('ix_courses_deleted_at', 'courses', ['deleted_at'])


def downgrade() -> None:
    op.drop_index('ix_courses_deleted_at', table_name='courses')
    op.drop_index('ix_courses_teacher_id', table_name='courses')
    op.drop_table('courses')
    sa.Enum(name='course_level').drop(op.get_bind(), checkfirst=True)

    op.drop_index('ix_sub_categories_deleted_at', table_name='sub_categories')
    op.drop_table('sub_categories')
    op.drop_index('ix_categories_deleted_at', table_name='categories')
    op.drop_table('categories')
