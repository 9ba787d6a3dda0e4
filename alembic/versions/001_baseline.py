"""Baseline schema: users, challenges, groups, submissions, activities.

Membership (groups.member_ids, users.group_ids), badges and the
reaction/comment lists are JSONB arrays on the owning row.

Revision ID: 001_baseline
Revises:
Create Date: 2026-10-19
"""

from collections.abc import Sequence

from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # --- Users ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS users (
            id SERIAL PRIMARY KEY,
            email VARCHAR(320) UNIQUE NOT NULL,
            name VARCHAR(64) NOT NULL,
            avatar TEXT,
            current_day INTEGER NOT NULL DEFAULT 1 CHECK (current_day >= 1),
            current_streak INTEGER NOT NULL DEFAULT 0 CHECK (current_streak >= 0),
            longest_streak INTEGER NOT NULL DEFAULT 0 CHECK (longest_streak >= current_streak),
            total_points INTEGER NOT NULL DEFAULT 0 CHECK (total_points >= 0),
            total_challenges INTEGER NOT NULL DEFAULT 0 CHECK (total_challenges >= 0),
            success_rate INTEGER NOT NULL DEFAULT 0,
            badges JSONB NOT NULL DEFAULT '[]',
            group_ids JSONB NOT NULL DEFAULT '[]',
            created_at TIMESTAMPTZ,
            last_login_at TIMESTAMPTZ
        )
    """)

    # --- Challenges ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS challenges (
            id SERIAL PRIMARY KEY,
            day INTEGER UNIQUE NOT NULL CHECK (day >= 1),
            title VARCHAR(128) NOT NULL,
            description TEXT NOT NULL,
            video_url TEXT NOT NULL,
            duration VARCHAR(32) NOT NULL,
            difficulty INTEGER NOT NULL DEFAULT 1 CHECK (difficulty BETWEEN 1 AND 3),
            points INTEGER NOT NULL DEFAULT 100,
            is_active BOOLEAN NOT NULL DEFAULT true,
            created_at TIMESTAMPTZ
        )
    """)

    # --- Groups ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS groups (
            id SERIAL PRIMARY KEY,
            name VARCHAR(64) NOT NULL,
            description VARCHAR(256),
            owner_id INTEGER NOT NULL REFERENCES users(id),
            member_ids JSONB NOT NULL DEFAULT '[]',
            total_points INTEGER NOT NULL DEFAULT 0,
            is_public BOOLEAN NOT NULL DEFAULT false,
            invite_code VARCHAR(6) UNIQUE NOT NULL,
            created_at TIMESTAMPTZ
        )
    """)

    # --- Submissions ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS submissions (
            id SERIAL PRIMARY KEY,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            challenge_id INTEGER NOT NULL REFERENCES challenges(id),
            challenge_day INTEGER NOT NULL,
            type VARCHAR(16) NOT NULL CHECK (type IN ('video', 'photo', 'text', 'emoji')),
            content TEXT NOT NULL,
            is_success BOOLEAN NOT NULL,
            points INTEGER NOT NULL,
            group_id INTEGER REFERENCES groups(id) ON DELETE SET NULL,
            reactions JSONB NOT NULL DEFAULT '[]',
            comments JSONB NOT NULL DEFAULT '[]',
            created_at TIMESTAMPTZ
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_submissions_user_created
        ON submissions(user_id, created_at)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_submissions_group_created
        ON submissions(group_id, created_at)
    """)

    # --- Activities ---
    op.execute("""
        CREATE TABLE IF NOT EXISTS activities (
            id SERIAL PRIMARY KEY,
            user_id INTEGER NOT NULL REFERENCES users(id) ON DELETE CASCADE,
            type VARCHAR(32) NOT NULL,
            content TEXT NOT NULL,
            related_id VARCHAR(64),
            group_id INTEGER REFERENCES groups(id) ON DELETE SET NULL,
            created_at TIMESTAMPTZ
        )
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_activities_user_created
        ON activities(user_id, created_at)
    """)
    op.execute("""
        CREATE INDEX IF NOT EXISTS idx_activities_group_created
        ON activities(group_id, created_at)
    """)


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS activities CASCADE")
    op.execute("DROP TABLE IF EXISTS submissions CASCADE")
    op.execute("DROP TABLE IF EXISTS groups CASCADE")
    op.execute("DROP TABLE IF EXISTS challenges CASCADE")
    op.execute("DROP TABLE IF EXISTS users CASCADE")
