def election_payload(election, block_height):
    return {
        "id": election.id,
        "name": election.name,
        "description": election.description,
        "registration_end_block": election.registration_end_block,
        "start_block": election.start_block,
        "end_block": election.end_block,
        "admin": election.admin,
        "candidate_count": election.candidate_count,
        "voter_count": election.voter_count,
        "status": election.status,
        "phase": election.phase_at(block_height),
    }


def candidate_payload(candidate):
    return {
        "election_id": candidate.election_id,
        "candidate_id": candidate.candidate_id,
        "name": candidate.name,
        "manifesto": candidate.manifesto,
        "vote_tally": candidate.vote_tally,
    }


def voter_payload(voter):
    return {
        "election_id": voter.election_id,
        "principal": voter.principal,
        "registered": voter.registered,
        "voted": voter.voted,
        "weight": voter.weight,
        "vote_block": voter.vote_block,
    }


def attestation_payload(attestation):
    return {
        "principal": attestation.principal,
        "verified": attestation.verified,
        "verification_method": attestation.verification_method,
        "verification_block": attestation.verification_block,
    }


def event_payload(event):
    return {
        "id": event.id,
        "event_type": event.event_type,
        "principal": event.principal,
        "election_id": event.election_id,
        "block_height": event.block_height,
        "payload": event.payload,
    }


def standings_payload(standings):
    return {
        "total_weight": standings["total_weight"],
        "ballots_cast": standings["ballots_cast"],
        "top_tally": standings["top_tally"],
        "is_tie": standings["is_tie"],
        "leader": (
            standings["leader"].candidate_id if standings["leader"] is not None else None
        ),
        "leaders": [candidate.candidate_id for candidate in standings["leaders"]],
        "candidate_results": [
            {
                "candidate_id": row["candidate"].candidate_id,
                "name": row["candidate"].name,
                "tally": row["tally"],
                "percent": row["percent"],
            }
            for row in standings["candidate_results"]
        ],
    }
