from app.extensions import db

PHASE_REGISTRATION = "REGISTRATION"
PHASE_PENDING = "PENDING"
PHASE_VOTING = "VOTING"
PHASE_CLOSED = "CLOSED"


class Election(db.Model):
    __tablename__ = "elections"

    id = db.Column(db.Integer, primary_key=True, autoincrement=False)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=True)
    registration_end_block = db.Column(db.BigInteger, nullable=False)
    start_block = db.Column(db.BigInteger, nullable=False)
    end_block = db.Column(db.BigInteger, nullable=False)
    admin = db.Column(db.String(200), nullable=False)
    candidate_count = db.Column(db.Integer, nullable=False, default=0)
    voter_count = db.Column(db.Integer, nullable=False, default=0)

    # Set once at creation. Use phase_at() for the actual phase.
    status = db.Column(db.String(20), nullable=False, default="created")

    candidates = db.relationship(
        "Candidate",
        backref="election",
        lazy=True,
        order_by="Candidate.candidate_id",
    )
    voters = db.relationship("Voter", backref="election", lazy=True)

    def phase_at(self, block_height):
        if block_height <= self.registration_end_block:
            return PHASE_REGISTRATION
        if block_height < self.start_block:
            return PHASE_PENDING
        if block_height <= self.end_block:
            return PHASE_VOTING
        return PHASE_CLOSED
