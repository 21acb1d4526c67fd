from app.models.candidate import Candidate
from app.models.chain_state import ChainState
from app.models.election import Election
from app.models.identity_attestation import IdentityAttestation
from app.models.ledger_event import LedgerEvent
from app.models.voter import Voter

__all__ = [
    "ChainState",
    "Election",
    "Candidate",
    "Voter",
    "IdentityAttestation",
    "LedgerEvent",
]
