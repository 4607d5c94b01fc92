from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False, nullable=False),
        sa.Column("title", sa.String(length=50), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author", sa.String(length=255)),
        sa.Column("published_date", sa.DateTime()),
    )
    op.create_index("ix_posts_published_date", "posts", ["published_date"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_posts_published_date", table_name="posts")
    op.drop_table("posts")
