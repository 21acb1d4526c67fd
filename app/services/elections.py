from flask import current_app

from app.extensions import db
from app.models import Candidate, Election, Voter
from app.models.candidate import BIGINT_MAX
from app.services.errors import (
    AlreadyRegistered,
    AlreadyVoted,
    InvalidCandidate,
    InvalidParameters,
    NotFound,
    RegistrationClosed,
    Unauthorized,
    VotingClosed,
    VotingNotStarted,
)
from app.services.identity import is_verified
from app.services.ledger import allocate_election_id, emit_event, ledger_transaction


def get_election(election_id):
    return db.session.get(Election, election_id)


def list_elections():
    return Election.query.order_by(Election.id).all()


def get_candidate(election_id, candidate_id):
    return db.session.get(Candidate, (election_id, candidate_id))


def list_candidates(election_id):
    return (
        Candidate.query.filter_by(election_id=election_id)
        .order_by(Candidate.candidate_id)
        .all()
    )


def get_voter(election_id, principal):
    return db.session.get(Voter, (election_id, principal))


def _lock_election(election_id):
    election = Election.query.filter_by(id=election_id).with_for_update().first()
    if election is None:
        raise NotFound(f"Election {election_id} does not exist.")
    return election


@ledger_transaction
def create_election(
    name, description, start_block, end_block, registration_end_block, caller, block_height
):
    if not (registration_end_block < start_block < end_block):
        raise InvalidParameters(
            "Block thresholds must satisfy registration_end_block < start_block < end_block."
        )

    election = Election(
        id=allocate_election_id(),
        name=name,
        description=description,
        registration_end_block=registration_end_block,
        start_block=start_block,
        end_block=end_block,
        admin=caller,
        candidate_count=0,
        voter_count=0,
        status="created",
    )
    db.session.add(election)
    emit_event("election-created", caller, block_height, election_id=election.id, name=name)

    current_app.logger.info("Election %s created by %s", election.id, caller)
    return election.id


@ledger_transaction
def add_candidate(election_id, name, manifesto, caller, block_height):
    election = _lock_election(election_id)
    if election.admin != caller:
        raise Unauthorized("Only the election admin can add candidates.")
    if block_height > election.registration_end_block:
        raise RegistrationClosed()

    candidate_id = election.candidate_count
    db.session.add(
        Candidate(
            election_id=election.id,
            candidate_id=candidate_id,
            name=name,
            manifesto=manifesto,
            vote_tally=0,
        )
    )
    election.candidate_count = candidate_id + 1
    emit_event(
        "candidate-added",
        caller,
        block_height,
        election_id=election.id,
        candidate_id=candidate_id,
        name=name,
    )

    current_app.logger.info(
        "Candidate %s added to election %s", candidate_id, election.id
    )
    return candidate_id


@ledger_transaction
def register_voter(election_id, weight, caller, block_height):
    if not 0 <= weight <= current_app.config["MAX_WEIGHT"]:
        raise InvalidParameters(
            f"Weight must be between 0 and {current_app.config['MAX_WEIGHT']}."
        )

    election = _lock_election(election_id)
    if block_height > election.registration_end_block:
        raise RegistrationClosed()

    voter = get_voter(election.id, caller)
    if voter is not None and voter.registered:
        raise AlreadyRegistered()

    if current_app.config["REQUIRE_IDENTITY_ATTESTATION"] and not is_verified(caller):
        raise Unauthorized("A verified identity is required to register.")

    if voter is None:
        voter = Voter(election_id=election.id, principal=caller)
        db.session.add(voter)
    voter.registered = True
    voter.voted = False
    voter.weight = weight
    voter.vote_block = None
    election.voter_count = election.voter_count + 1
    emit_event(
        "voter-registered", caller, block_height, election_id=election.id, weight=weight
    )

    current_app.logger.info(
        "Voter %s registered for election %s with weight %s", caller, election.id, weight
    )
    return True


@ledger_transaction
def cast_vote(election_id, candidate_id, caller, block_height):
    election = _lock_election(election_id)

    voter = get_voter(election.id, caller)
    if voter is None:
        raise NotFound(f"{caller} is not a voter in election {election.id}.")

    candidate = get_candidate(election.id, candidate_id)
    if candidate is None:
        raise InvalidCandidate()

    if block_height < election.start_block:
        raise VotingNotStarted()
    if block_height > election.end_block:
        raise VotingClosed()
    if not voter.registered:
        raise Unauthorized("Voter is not registered.")
    if voter.voted:
        raise AlreadyVoted()
    if candidate.vote_tally + voter.weight > BIGINT_MAX:
        raise InvalidParameters("Vote would overflow the candidate tally.")

    voter.voted = True
    voter.vote_block = block_height
    candidate.vote_tally = candidate.vote_tally + voter.weight
    emit_event(
        "vote-cast",
        caller,
        block_height,
        election_id=election.id,
        candidate_id=candidate.candidate_id,
        weight=voter.weight,
    )

    current_app.logger.info(
        "Vote cast in election %s for candidate %s (weight %s)",
        election.id,
        candidate.candidate_id,
        voter.weight,
    )
    return True
