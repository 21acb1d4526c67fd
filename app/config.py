import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="false"):
    return os.getenv(name, default).lower() == "true"


class Config:
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///ledger.sqlite3")
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-only-change-me")

    # Boundary limits for text fields, enforced before the election service.
    MAX_NAME_LENGTH = int(os.getenv("MAX_NAME_LENGTH", "100"))
    MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "500"))
    MAX_METHOD_LENGTH = int(os.getenv("MAX_METHOD_LENGTH", "50"))

    GENESIS_BLOCK_HEIGHT = int(os.getenv("GENESIS_BLOCK_HEIGHT", "0"))
    MAX_BLOCK_HEIGHT = int(os.getenv("MAX_BLOCK_HEIGHT", str(2**63 - 1)))
    MAX_WEIGHT = int(os.getenv("MAX_WEIGHT", str(2**32)))

    # Principals allowed to advance the chain clock over HTTP.
    CHAIN_OPERATORS = [
        name.strip()
        for name in os.getenv("CHAIN_OPERATORS", "").split(",")
        if name.strip()
    ]

    # When true, voters must hold a verified identity attestation to register.
    REQUIRE_IDENTITY_ATTESTATION = _env_flag("REQUIRE_IDENTITY_ATTESTATION")

    # Dotted path, class or instance of a ProofVerifier.
    PROOF_VERIFIER = os.getenv(
        "PROOF_VERIFIER", "app.services.identity:AcceptAllProofVerifier"
    )
