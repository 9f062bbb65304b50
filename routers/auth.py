from fastapi import APIRouter, HTTPException, status

from config import API_PREFIX, LOGIN_PATH
from schemas import LoginRequest, TokenResponse
from security import authenticate, create_access_token
from logger import get_logger

router = APIRouter(prefix=API_PREFIX, tags=["auth"])
logger = get_logger()


@router.post(LOGIN_PATH, response_model=TokenResponse)
async def login(credentials: LoginRequest):
    """Exchanges username and password for a bearer token."""
    principal = authenticate(credentials.username, credentials.password)
    if principal is None:
        logger.warning(f"Failed login for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Bad credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    logger.info(f"User '{principal.username}' logged in")
    return TokenResponse(token=create_access_token(principal.username, principal.roles))
