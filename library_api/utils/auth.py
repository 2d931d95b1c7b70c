from functools import wraps
from flask import g, request

from library_api.errors import Unauthenticated
from library_api.utils.tokens import verify_token


def _extract_token():
    # Authorization: Bearer wins, x-access-token is the fallback
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        token = auth_header[len("Bearer "):].strip()
        if token:
            return token
    return (request.headers.get("x-access-token") or "").strip() or None


def token_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        token = _extract_token()
        if not token:
            raise Unauthenticated()
        g.current_user = verify_token(token)
        return view(*args, **kwargs)
    return wrapped


def current_identity():
    return g.current_user
