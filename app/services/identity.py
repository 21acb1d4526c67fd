"""Identity attestation.

The proof check is delegated to a ``ProofVerifier``: any object with an
``is_valid_proof(proof, identity_commitment)`` method returning a bool. The
stock ``AcceptAllProofVerifier`` accepts every proof, so attestations made
with it carry no security guarantee. Configure ``PROOF_VERIFIER`` with a real
verifier before relying on attestations.
"""
from typing import Protocol

from flask import current_app
from werkzeug.utils import import_string

from app.extensions import db
from app.models import IdentityAttestation
from app.services.errors import Unauthorized
from app.services.ledger import emit_event, ledger_transaction

PROOF_VERIFIER_KEY = "proof_verifier"


class ProofVerifier(Protocol):
    def is_valid_proof(self, proof, identity_commitment) -> bool:
        ...


class AcceptAllProofVerifier:
    """Accepts every proof. Placeholder for a zero-knowledge verifier."""

    def is_valid_proof(self, proof, identity_commitment) -> bool:
        current_app.logger.warning(
            "AcceptAllProofVerifier accepted a proof without checking it"
        )
        return True


def load_proof_verifier(setting):
    verifier = import_string(setting) if isinstance(setting, str) else setting
    if isinstance(verifier, type):
        verifier = verifier()
    if not callable(getattr(verifier, "is_valid_proof", None)):
        raise TypeError(f"{verifier!r} does not implement is_valid_proof()")
    return verifier


def get_proof_verifier():
    return current_app.extensions[PROOF_VERIFIER_KEY]


def get_identity(principal):
    return db.session.get(IdentityAttestation, principal)


def is_verified(principal):
    attestation = get_identity(principal)
    return attestation is not None and attestation.verified


@ledger_transaction
def verify_identity(
    proof, identity_commitment, verification_method, caller, block_height, verifier=None
):
    if verifier is None:
        verifier = get_proof_verifier()
    if not verifier.is_valid_proof(proof, identity_commitment):
        raise Unauthorized("Identity proof was rejected.")

    attestation = get_identity(caller)
    if attestation is None:
        attestation = IdentityAttestation(principal=caller)
        db.session.add(attestation)
    attestation.verified = True
    attestation.verification_method = verification_method
    attestation.verification_block = block_height

    emit_event(
        "identity-verified",
        caller,
        block_height,
        method=verification_method,
        timestamp=block_height,
    )
    current_app.logger.info(
        "Identity verified for %s via %s at block %s",
        caller,
        verification_method,
        block_height,
    )
    return True
