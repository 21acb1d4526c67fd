from flask import current_app
from flask_login import current_user, login_required

from app.routes.params import json_body, require_int, require_text
from app.routes.serializers import (
    candidate_payload,
    election_payload,
    standings_payload,
)
from app.services.elections import (
    add_candidate,
    create_election,
    get_candidate,
    get_election,
    list_candidates,
    list_elections,
)
from app.services.errors import InvalidCandidate, NotFound
from app.services.ledger import current_block_height
from app.services.standings import election_standings


def _election_or_404(election_id):
    election = get_election(election_id)
    if election is None:
        raise NotFound(f"Election {election_id} does not exist.")
    return election


def register_election_routes(app):
    @app.route("/elections")
    def elections_index():
        block_height = current_block_height()
        return {
            "ok": True,
            "block_height": block_height,
            "elections": [
                election_payload(election, block_height)
                for election in list_elections()
            ],
        }

    @app.route("/elections", methods=["POST"])
    @login_required
    def elections_create():
        config = current_app.config
        data = json_body()
        name = require_text(data, "name", config["MAX_NAME_LENGTH"])
        description = require_text(
            data, "description", config["MAX_TEXT_LENGTH"], required=False
        )
        max_block = config["MAX_BLOCK_HEIGHT"]
        start_block = require_int(data, "start_block", maximum=max_block)
        end_block = require_int(data, "end_block", maximum=max_block)
        registration_end_block = require_int(
            data, "registration_end_block", maximum=max_block
        )

        block_height = current_block_height()
        election_id = create_election(
            name,
            description,
            start_block,
            end_block,
            registration_end_block,
            current_user.name,
            block_height,
        )
        election = get_election(election_id)
        return {"ok": True, "election": election_payload(election, block_height)}, 201

    @app.route("/elections/<int:election_id>")
    def elections_detail(election_id):
        election = _election_or_404(election_id)
        return {
            "ok": True,
            "election": election_payload(election, current_block_height()),
        }

    @app.route("/elections/<int:election_id>/candidates")
    def candidates_index(election_id):
        _election_or_404(election_id)
        return {
            "ok": True,
            "candidates": [
                candidate_payload(candidate)
                for candidate in list_candidates(election_id)
            ],
        }

    @app.route("/elections/<int:election_id>/candidates", methods=["POST"])
    @login_required
    def candidates_create(election_id):
        config = current_app.config
        data = json_body()
        name = require_text(data, "name", config["MAX_NAME_LENGTH"])
        manifesto = require_text(
            data, "manifesto", config["MAX_TEXT_LENGTH"], required=False
        )

        candidate_id = add_candidate(
            election_id, name, manifesto, current_user.name, current_block_height()
        )
        candidate = get_candidate(election_id, candidate_id)
        return {"ok": True, "candidate": candidate_payload(candidate)}, 201

    @app.route("/elections/<int:election_id>/candidates/<int:candidate_id>")
    def candidates_detail(election_id, candidate_id):
        _election_or_404(election_id)
        candidate = get_candidate(election_id, candidate_id)
        if candidate is None:
            raise InvalidCandidate()
        return {"ok": True, "candidate": candidate_payload(candidate)}

    @app.route("/elections/<int:election_id>/standings")
    def elections_standings(election_id):
        election = _election_or_404(election_id)
        block_height = current_block_height()
        return {
            "ok": True,
            "phase": election.phase_at(block_height),
            "standings": standings_payload(election_standings(election)),
        }
