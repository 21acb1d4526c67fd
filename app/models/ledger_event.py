from app.extensions import db


class LedgerEvent(db.Model):
    __tablename__ = "ledger_events"

    id = db.Column(db.Integer, primary_key=True)
    event_type = db.Column(db.String(50), nullable=False)
    principal = db.Column(db.String(200), nullable=False)
    election_id = db.Column(db.Integer, nullable=True)
    block_height = db.Column(db.BigInteger, nullable=False)
    payload = db.Column(db.JSON, nullable=False, default=dict)

    __table_args__ = (db.Index("idx_ledger_events_election", "election_id"),)
