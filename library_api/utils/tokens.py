from dataclasses import dataclass

from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

from library_api.errors import InvalidToken


@dataclass(frozen=True)
class TokenIdentity:
    user_id: str
    username: str


def issue_token(user) -> str:
    """HS256 token with {sub, userId, username, iat, exp}; exp = iat + JWT_ACCESS_TOKEN_EXPIRES."""
    return create_access_token(
        identity=user.user_id,
        additional_claims={"userId": user.user_id, "username": user.username},
    )


def verify_token(token: str) -> TokenIdentity:
    try:
        claims = decode_token(token)
    except (PyJWTError, JWTExtendedException) as e:
        current_app.logger.info(f"[auth] Token verification failed: {e}")
        raise InvalidToken()

    user_id = claims.get("userId") or claims.get("sub")
    if not user_id:
        raise InvalidToken()
    return TokenIdentity(user_id=str(user_id), username=claims.get("username"))
