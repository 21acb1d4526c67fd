from app.extensions import db


class Voter(db.Model):
    __tablename__ = "voters"

    election_id = db.Column(
        db.Integer, db.ForeignKey("elections.id"), primary_key=True, autoincrement=False
    )
    principal = db.Column(db.String(200), primary_key=True)
    registered = db.Column(db.Boolean, nullable=False, default=False)
    voted = db.Column(db.Boolean, nullable=False, default=False)
    weight = db.Column(db.BigInteger, nullable=False, default=0)
    vote_block = db.Column(db.BigInteger, nullable=True)
