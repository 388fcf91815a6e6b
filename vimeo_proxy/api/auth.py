from typing import Optional
from fastapi import Header

BEARER_PREFIX = "Bearer "

async def get_caller_token(authorization: Optional[str] = Header(None)) -> Optional[str]:
    """
    Extracts the caller secret from `Authorization: Bearer <token>`.
    Returns None for a missing or malformed header so the use case answers 401
    instead of FastAPI rejecting the request with 422.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    return authorization[len(BEARER_PREFIX):]
