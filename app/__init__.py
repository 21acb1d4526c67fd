from flask import Flask

from app.cli import register_commands
from app.config import Config
from app.extensions import db, login_manager, migrate
from app.routes import register_routes
from app.services.identity import (
    PROOF_VERIFIER_KEY,
    AcceptAllProofVerifier,
    load_proof_verifier,
)
from app.services.security import load_principal_from_request


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    @login_manager.request_loader
    def load_principal(request):
        return load_principal_from_request(request)

    @login_manager.unauthorized_handler
    def unauthorized():
        return {
            "ok": False,
            "error": "Unauthorized",
            "message": "A valid principal token is required.",
        }, 401

    verifier = load_proof_verifier(app.config["PROOF_VERIFIER"])
    app.extensions[PROOF_VERIFIER_KEY] = verifier
    if isinstance(verifier, AcceptAllProofVerifier):
        app.logger.warning(
            "Identity proofs are not checked: AcceptAllProofVerifier is configured"
        )

    register_routes(app)
    register_commands(app)
    return app


app = create_app()

__all__ = ["app", "db", "migrate", "create_app"]
