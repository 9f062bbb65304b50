from datetime import datetime, timedelta, timezone
import jwt
from config import JWT_SECRET, JWT_ALGORITHM, JWT_EXPIRATION_MINUTES
from .context import Principal

InvalidTokenError = jwt.InvalidTokenError


def create_access_token(username: str, roles, expires_in: timedelta = None) -> str:
    """Issues a signed bearer token for *username* carrying its roles."""
    now = datetime.now(timezone.utc)
    expires_in = expires_in if expires_in is not None else timedelta(minutes=JWT_EXPIRATION_MINUTES)
    payload = {
        "sub": username,
        "roles": sorted(roles),
        "iat": now,
        "exp": now + expires_in,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Principal:
    """Raises InvalidTokenError for a bad signature, a malformed or an expired token."""
    payload = jwt.decode(
        token,
        JWT_SECRET,
        algorithms=[JWT_ALGORITHM],
        options={"require": ["sub", "exp"]},
    )
    return Principal(username=payload["sub"], roles=frozenset(payload.get("roles", [])))
