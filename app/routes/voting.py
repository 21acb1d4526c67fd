from flask import current_app
from flask_login import current_user, login_required

from app.models.candidate import BIGINT_MAX
from app.routes.params import json_body, require_int
from app.routes.serializers import voter_payload
from app.services.elections import cast_vote, get_election, get_voter, register_voter
from app.services.errors import NotFound
from app.services.ledger import current_block_height


def register_voting_routes(app):
    @app.route("/elections/<int:election_id>/voters", methods=["POST"])
    @login_required
    def voters_register(election_id):
        data = json_body()
        weight = require_int(data, "weight", maximum=current_app.config["MAX_WEIGHT"])

        register_voter(election_id, weight, current_user.name, current_block_height())
        voter = get_voter(election_id, current_user.name)
        return {"ok": True, "voter": voter_payload(voter)}, 201

    @app.route("/elections/<int:election_id>/voters/<principal>")
    def voters_detail(election_id, principal):
        if get_election(election_id) is None:
            raise NotFound(f"Election {election_id} does not exist.")
        voter = get_voter(election_id, principal)
        if voter is None:
            raise NotFound(f"{principal} is not a voter in election {election_id}.")
        return {"ok": True, "voter": voter_payload(voter)}

    @app.route("/elections/<int:election_id>/votes", methods=["POST"])
    @login_required
    def votes_cast(election_id):
        data = json_body()
        candidate_id = require_int(data, "candidate_id", maximum=BIGINT_MAX)

        block_height = current_block_height()
        cast_vote(election_id, candidate_id, current_user.name, block_height)
        voter = get_voter(election_id, current_user.name)
        return {"ok": True, "voter": voter_payload(voter)}
