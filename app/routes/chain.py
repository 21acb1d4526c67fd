from flask import current_app, request
from flask_login import current_user, login_required

from app.routes.params import json_body, require_int
from app.routes.serializers import event_payload
from app.services.errors import Unauthorized
from app.services.ledger import (
    advance_block_height,
    current_block_height,
    list_events,
    next_election_id,
)


def register_chain_routes(app):
    @app.route("/chain")
    def chain_state():
        return {
            "ok": True,
            "block_height": current_block_height(),
            "next_election_id": next_election_id(),
        }

    @app.route("/chain/blocks", methods=["POST"])
    @login_required
    def advance_chain():
        if current_user.name not in current_app.config["CHAIN_OPERATORS"]:
            raise Unauthorized("Only chain operators can advance the block height.")

        data = json_body()
        new_height = require_int(
            data, "block_height", maximum=current_app.config["MAX_BLOCK_HEIGHT"]
        )
        return {"ok": True, "block_height": advance_block_height(new_height)}

    @app.route("/chain/events")
    def chain_events():
        events = list_events(
            election_id=request.args.get("election_id", type=int),
            event_type=request.args.get("event_type"),
        )
        return {"ok": True, "events": [event_payload(event) for event in events]}
