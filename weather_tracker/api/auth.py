from fastapi import Depends, status, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from weather_tracker.config.config import load_config

security = HTTPBearer(auto_error=False)


async def verify_token(credentials: HTTPAuthorizationCredentials = Depends(security)):
    """
    Verify API token if authentication is enabled.

    Args:
        credentials: Bearer token credentials

    Returns:
        True if authenticated or no auth required

    Raises:
        HTTPException: If authentication fails
    """
    api_token = load_config().api_token

    # If no API token is configured, allow all requests
    if not api_token:
        return True

    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required. Please provide a valid Bearer token."
        )

    if credentials.credentials != api_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authentication token."
        )

    return True
