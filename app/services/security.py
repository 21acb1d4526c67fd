from flask import current_app
from flask_login import UserMixin
from itsdangerous import BadSignature, URLSafeSerializer


class Principal(UserMixin):
    def __init__(self, name):
        self.id = name
        self.name = name


def _principal_serializer():
    return URLSafeSerializer(current_app.config["SECRET_KEY"], salt="ledger-principal")


def generate_principal_token(principal):
    return _principal_serializer().dumps(principal)


def verify_principal_token(token):
    try:
        principal = _principal_serializer().loads(token)
    except BadSignature:
        return None
    if not isinstance(principal, str) or not principal:
        return None
    return principal


def load_principal_from_request(request):
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None

    principal = verify_principal_token(token.strip())
    if principal is None:
        current_app.logger.warning("Rejected invalid principal token")
        return None
    return Principal(principal)
