from flask import current_app

from app.routes.chain import register_chain_routes
from app.routes.elections import register_election_routes
from app.routes.identity import register_identity_routes
from app.routes.voting import register_voting_routes
from app.services.errors import ElectionError


def register_error_handlers(app):
    @app.errorhandler(ElectionError)
    def handle_election_error(error):
        current_app.logger.warning("Rejected: %s (%s)", error.code, error.message)
        return {"ok": False, "error": error.code, "message": error.message}, error.status_code


def register_routes(app):
    register_error_handlers(app)
    register_chain_routes(app)
    register_election_routes(app)
    register_voting_routes(app)
    register_identity_routes(app)
