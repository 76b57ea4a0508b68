import logging
from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session
from typing import Optional
from travel_booking.database import get_db
from travel_booking.auth.service import UserService
from travel_booking.auth.token_service import TokenService

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "

def get_token_service(request: Request) -> TokenService:
    """Token service built once at application startup"""
    return request.app.state.token_service

def resolve_identity(raw_header: Optional[str], token_service: TokenService) -> Optional[str]:
    """
    Resolve an ``Authorization`` header value to the caller's email.

    Returns None for a missing header, a non-Bearer scheme, or a token that
    fails verification for any reason.
    """
    if not isinstance(raw_header, str) or not raw_header.startswith(BEARER_PREFIX):
        return None

    token = raw_header[len(BEARER_PREFIX):]
    try:
        verification = token_service.verify(token)
    except Exception:
        logger.debug("Token verification raised", exc_info=True)
        return None

    if not verification.ok:
        logger.debug("Rejected token: %s", verification.error)
        return None
    return verification.subject

def get_current_user(
    authorization: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),
    db: Session = Depends(get_db)
):
    """Get current authenticated user"""
    email = resolve_identity(authorization, token_service)
    if email is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or missing token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = UserService.get_user_by_email(db, email)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    return user
