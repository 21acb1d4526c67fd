"""create ledger tables

Revision ID: 3a9c1e7d5b20
Revises: 
Create Date: 2026-10-18 10:12:44.518203

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3a9c1e7d5b20"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "chain_state",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("block_height", sa.BigInteger(), nullable=False),
        sa.Column("election_counter", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "elections",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("registration_end_block", sa.BigInteger(), nullable=False),
        sa.Column("start_block", sa.BigInteger(), nullable=False),
        sa.Column("end_block", sa.BigInteger(), nullable=False),
        sa.Column("admin", sa.String(length=200), nullable=False),
        sa.Column("candidate_count", sa.Integer(), nullable=False),
        sa.Column("voter_count", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_table(
        "candidates",
        sa.Column("election_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("candidate_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("manifesto", sa.Text(), nullable=True),
        sa.Column("vote_tally", sa.BigInteger(), nullable=False),
        sa.ForeignKeyConstraint(["election_id"], ["elections.id"]),
        sa.PrimaryKeyConstraint("election_id", "candidate_id"),
    )
    op.create_table(
        "voters",
        sa.Column("election_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("principal", sa.String(length=200), nullable=False),
        sa.Column("registered", sa.Boolean(), nullable=False),
        sa.Column("voted", sa.Boolean(), nullable=False),
        sa.Column("weight", sa.BigInteger(), nullable=False),
        sa.Column("vote_block", sa.BigInteger(), nullable=True),
        sa.ForeignKeyConstraint(["election_id"], ["elections.id"]),
        sa.PrimaryKeyConstraint("election_id", "principal"),
    )
    op.create_table(
        "identity_attestations",
        sa.Column("principal", sa.String(length=200), nullable=False),
        sa.Column("verified", sa.Boolean(), nullable=False),
        sa.Column("verification_method", sa.String(length=100), nullable=False),
        sa.Column("verification_block", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("principal"),
    )
    op.create_table(
        "ledger_events",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("event_type", sa.String(length=50), nullable=False),
        sa.Column("principal", sa.String(length=200), nullable=False),
        sa.Column("election_id", sa.Integer(), nullable=True),
        sa.Column("block_height", sa.BigInteger(), nullable=False),
        sa.Column("payload", sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_ledger_events_election", "ledger_events", ["election_id"], unique=False
    )


def downgrade():
    op.drop_index("idx_ledger_events_election", table_name="ledger_events")
    op.drop_table("ledger_events")
    op.drop_table("identity_attestations")
    op.drop_table("voters")
    op.drop_table("candidates")
    op.drop_table("elections")
    op.drop_table("chain_state")
