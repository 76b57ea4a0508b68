import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from travel_booking.database import get_db
from travel_booking.auth.schemas import AuthRequest, AuthResponse
from travel_booking.auth.service import UserService
from travel_booking.auth.token_service import TokenService
from travel_booking.auth.dependencies import get_token_service

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/register", response_model=AuthResponse)
def register_user(
    request: AuthRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service)
):
    """Register a new user and issue a token"""
    try:
        user = UserService.create_user(db=db, email=request.email, password=request.password)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return AuthResponse(token=token_service.issue(user.email), email=user.email)

@router.post("/login", response_model=AuthResponse)
def login(
    request: AuthRequest,
    db: Session = Depends(get_db),
    token_service: TokenService = Depends(get_token_service)
):
    """Exchange email and password for a token"""
    try:
        user = UserService.authenticate(db, request.email, request.password)
        if not user:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid credentials",
                headers={"WWW-Authenticate": "Bearer"},
            )

        logger.info("User id=%s logged in", user.id)
        return AuthResponse(token=token_service.issue(user.email), email=user.email)
    except HTTPException:
        raise
    except Exception as e:
        logger.warning("Login failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e)
        )
