from app.extensions import db

CHAIN_STATE_ID = 1


class ChainState(db.Model):
    """Ledger-wide variables: the block clock and the election id counter."""

    __tablename__ = "chain_state"

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    block_height = db.Column(db.BigInteger, nullable=False, default=0)
    election_counter = db.Column(db.BigInteger, nullable=False, default=0)
