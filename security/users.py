import hmac
from typing import Optional
from config import ADMIN_PASSWORD, USER_PASSWORD
from .context import Principal, ROLE_ADMIN, ROLE_USER

# username -> (password, roles)
USERS = {
    "admin": (ADMIN_PASSWORD, frozenset({ROLE_USER, ROLE_ADMIN})),
    "user": (USER_PASSWORD, frozenset({ROLE_USER})),
}


def authenticate(username: str, password: str) -> Optional[Principal]:
    """Returns the principal for valid credentials, None otherwise."""
    entry = USERS.get(username)
    if entry is None:
        return None
    expected, roles = entry
    if not hmac.compare_digest(expected.encode(), password.encode()):
        return None
    return Principal(username=username, roles=roles)
