def election_standings(election):
    candidates = list(election.candidates)
    total_weight = sum(candidate.vote_tally for candidate in candidates)
    top_tally = max((candidate.vote_tally for candidate in candidates), default=0)

    leaders = []
    if top_tally > 0:
        leaders = [
            candidate for candidate in candidates if candidate.vote_tally == top_tally
        ]

    candidate_results = []
    for candidate in candidates:
        tally = candidate.vote_tally
        percent = (tally / total_weight * 100) if total_weight > 0 else 0
        candidate_results.append(
            {"candidate": candidate, "tally": tally, "percent": percent}
        )

    candidate_results.sort(
        key=lambda row: (-row["tally"], row["candidate"].candidate_id)
    )

    ballots_cast = sum(1 for voter in election.voters if voter.voted)

    return {
        "total_weight": total_weight,
        "ballots_cast": ballots_cast,
        "candidate_results": candidate_results,
        "leader": leaders[0] if len(leaders) == 1 else None,
        "leaders": leaders,
        "is_tie": len(leaders) > 1,
        "top_tally": top_tally,
    }
