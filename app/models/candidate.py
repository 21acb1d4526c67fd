from app.extensions import db

# Largest value a signed 64-bit BIGINT column holds.
BIGINT_MAX = 2**63 - 1


class Candidate(db.Model):
    __tablename__ = "candidates"

    election_id = db.Column(
        db.Integer, db.ForeignKey("elections.id"), primary_key=True, autoincrement=False
    )
    candidate_id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(200), nullable=False)
    manifesto = db.Column(db.Text, nullable=True)
    vote_tally = db.Column(db.BigInteger, nullable=False, default=0)
