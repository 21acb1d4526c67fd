import logging

import pytest

from app.models import IdentityAttestation, LedgerEvent
from app.services.errors import Unauthorized
from app.services.identity import (
    AcceptAllProofVerifier,
    get_identity,
    get_proof_verifier,
    is_verified,
    load_proof_verifier,
    verify_identity,
)


class RejectingProofVerifier:
    def __init__(self):
        self.calls = []

    def is_valid_proof(self, proof, identity_commitment):
        self.calls.append((proof, identity_commitment))
        return False


def test_default_verifier_accepts_any_proof(app, db_session, caplog):
    assert isinstance(get_proof_verifier(), AcceptAllProofVerifier)

    with caplog.at_level(logging.WARNING):
        assert verify_identity("", "", "none", "ST2ALICE", 4) is True

    assert "without checking" in caplog.text
    attestation = get_identity("ST2ALICE")
    assert attestation.verified is True
    assert attestation.verification_method == "none"
    assert attestation.verification_block == 4
    assert is_verified("ST2ALICE") is True


def test_verification_overwrites_previous_attestation(db_session):
    verify_identity("p1", "c1", "zk-snark", "ST2ALICE", 4)
    verify_identity("p2", "c2", "passport", "ST2ALICE", 9)

    assert IdentityAttestation.query.count() == 1
    attestation = get_identity("ST2ALICE")
    assert attestation.verification_method == "passport"
    assert attestation.verification_block == 9


def test_rejected_proof_raises_and_stores_nothing(db_session):
    verifier = RejectingProofVerifier()

    with pytest.raises(Unauthorized):
        verify_identity("bad", "commitment", "zk-snark", "ST2ALICE", 4, verifier=verifier)

    assert verifier.calls == [("bad", "commitment")]
    assert get_identity("ST2ALICE") is None
    assert is_verified("ST2ALICE") is False
    assert LedgerEvent.query.count() == 0


def test_rejected_proof_keeps_existing_attestation(db_session):
    verify_identity("p1", "c1", "zk-snark", "ST2ALICE", 4)

    with pytest.raises(Unauthorized):
        verify_identity(
            "p2", "c2", "passport", "ST2ALICE", 9, verifier=RejectingProofVerifier()
        )

    attestation = get_identity("ST2ALICE")
    assert attestation.verification_method == "zk-snark"
    assert attestation.verification_block == 4


def test_verification_emits_event(db_session):
    verify_identity("p1", "c1", "zk-snark", "ST2ALICE", 6)

    event = LedgerEvent.query.filter_by(event_type="identity-verified").one()
    assert event.principal == "ST2ALICE"
    assert event.election_id is None
    assert event.block_height == 6
    assert event.payload == {"method": "zk-snark", "timestamp": 6}


def test_configured_verifier_instance_is_used(tmp_path):
    from app import create_app

    verifier = RejectingProofVerifier()
    app = create_app(
        {
            "TESTING": True,
            "SQLALCHEMY_DATABASE_URI": f"sqlite:///{tmp_path / 'verifier.sqlite3'}",
            "PROOF_VERIFIER": verifier,
        }
    )

    with app.app_context():
        assert get_proof_verifier() is verifier


def test_load_proof_verifier_from_dotted_path():
    verifier = load_proof_verifier("app.services.identity:AcceptAllProofVerifier")
    assert isinstance(verifier, AcceptAllProofVerifier)


def test_load_proof_verifier_rejects_objects_without_method():
    with pytest.raises(TypeError):
        load_proof_verifier(object())


def test_load_proof_verifier_instantiates_a_class():
    verifier = load_proof_verifier(RejectingProofVerifier)

    assert isinstance(verifier, RejectingProofVerifier)
    assert verifier.is_valid_proof("proof", "commitment") is False
