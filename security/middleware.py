from starlette.responses import JSONResponse
from config import API_PREFIX, LOGIN_PATH, GRAPHQL_PATH
from logger import get_logger
from .context import ROLE_ADMIN, current_principal, has_role
from .tokens import InvalidTokenError, decode_access_token

logger = get_logger()

MUTATING_METHODS = {"POST", "PUT", "PATCH", "DELETE"}


def _bearer_token(scope):
    for name, value in scope.get("headers", []):
        if name == b"authorization":
            scheme, _, token = value.decode("latin-1").partition(" ")
            if scheme.lower() == "bearer" and token.strip():
                return token.strip()
    return None


class JwtAuthMiddleware:
    """
    Stateless per-request authentication.

    A valid bearer token populates ``current_principal``; a missing or bad one
    leaves the request anonymous. Mutating verbs need ADMIN except on the
    login and GraphQL paths, where the service layer does the checking.
    """

    def __init__(self, app, open_paths=None):
        self.app = app
        self.open_paths = set(open_paths or (API_PREFIX + LOGIN_PATH, GRAPHQL_PATH))

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        principal = None
        token = _bearer_token(scope)
        if token:
            try:
                principal = decode_access_token(token)
            except InvalidTokenError as e:
                logger.debug(f"Rejected bearer token: {e}")

        ctx_token = current_principal.set(principal)
        try:
            if not self._is_permitted(scope):
                response = JSONResponse({"detail": "Access is denied"}, status_code=403)
                await response(scope, receive, send)
                return
            await self.app(scope, receive, send)
        finally:
            current_principal.reset(ctx_token)

    def _is_permitted(self, scope) -> bool:
        path = scope.get("path", "").rstrip("/") or "/"
        if path in self.open_paths:
            return True
        if scope.get("method", "GET").upper() in MUTATING_METHODS:
            return has_role(ROLE_ADMIN)
        return True
