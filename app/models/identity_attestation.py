from app.extensions import db


class IdentityAttestation(db.Model):
    __tablename__ = "identity_attestations"

    principal = db.Column(db.String(200), primary_key=True)
    verified = db.Column(db.Boolean, nullable=False, default=False)
    verification_method = db.Column(db.String(100), nullable=False)
    verification_block = db.Column(db.BigInteger, nullable=False)
