"""Create user_account and article tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Initial board schema: authors (`user_account`) and posts (`article`),
       each with the created/modified audit columns.

Rollback: downgrade() drops both tables (all board data is lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list:
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), nullable=False,
                  comment="When the row was inserted (UTC)"),
        sa.Column("created_by", sa.String(100), nullable=False,
                  comment="Auditor that inserted the row"),
        sa.Column("modified_at", sa.TIMESTAMP(timezone=True), nullable=False,
                  comment="When the row was last written (UTC)"),
        sa.Column("modified_by", sa.String(100), nullable=False,
                  comment="Auditor that last wrote the row"),
    ]


def upgrade() -> None:
    op.create_table(
        "user_account",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(50), nullable=False, comment="Public user identifier"),
        sa.Column("user_password", sa.String(255), nullable=False),
        sa.Column("email", sa.String(100), nullable=False),
        sa.Column("nickname", sa.String(100), nullable=False),
        sa.Column("memo", sa.String(255), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id"),
    )
    op.create_index("idx_user_account_email", "user_account", ["email"], unique=True)
    op.create_index("idx_user_account_created_at", "user_account", ["created_at"])
    op.create_index("idx_user_account_created_by", "user_account", ["created_by"])

    op.create_table(
        "article",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_account_id", sa.Integer(), nullable=False, comment="Author of the article"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.String(10000), nullable=False),
        sa.Column("hashtag", sa.String(255), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_account_id"], ["user_account.id"]),
    )
    op.create_index("idx_article_title", "article", ["title"])
    op.create_index("idx_article_hashtag", "article", ["hashtag"])
    op.create_index("idx_article_created_at", "article", ["created_at"])
    op.create_index("idx_article_created_by", "article", ["created_by"])


def downgrade() -> None:
    op.drop_index("idx_article_created_by", table_name="article")
    op.drop_index("idx_article_created_at", table_name="article")
    op.drop_index("idx_article_hashtag", table_name="article")
    op.drop_index("idx_article_title", table_name="article")
    op.drop_table("article")

    op.drop_index("idx_user_account_created_by", table_name="user_account")
    op.drop_index("idx_user_account_created_at", table_name="user_account")
    op.drop_index("idx_user_account_email", table_name="user_account")
    op.drop_table("user_account")
