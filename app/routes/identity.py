from flask import current_app
from flask_login import current_user, login_required

from app.routes.params import json_body, require_text
from app.routes.serializers import attestation_payload
from app.services.errors import NotFound
from app.services.identity import get_identity, verify_identity
from app.services.ledger import current_block_height


def register_identity_routes(app):
    @app.route("/identity/verify", methods=["POST"])
    @login_required
    def identity_verify():
        config = current_app.config
        data = json_body()
        proof = require_text(data, "proof", config["MAX_TEXT_LENGTH"])
        identity_commitment = require_text(
            data, "identity_commitment", config["MAX_TEXT_LENGTH"]
        )
        method = require_text(data, "verification_method", config["MAX_METHOD_LENGTH"])

        verify_identity(
            proof, identity_commitment, method, current_user.name, current_block_height()
        )
        attestation = get_identity(current_user.name)
        return {"ok": True, "identity": attestation_payload(attestation)}

    @app.route("/identity/<principal>")
    def identity_detail(principal):
        attestation = get_identity(principal)
        if attestation is None:
            raise NotFound(f"No identity attestation for {principal}.")
        return {"ok": True, "identity": attestation_payload(attestation)}
