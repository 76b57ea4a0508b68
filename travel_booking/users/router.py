from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from travel_booking.database import get_db
from travel_booking.models import User
from travel_booking.auth.dependencies import get_current_user
from travel_booking.auth.service import UserService
from travel_booking.users.schemas import ProfileUpdate, UserProfile

router = APIRouter()

@router.get("/profile", response_model=UserProfile)
def get_profile(current_user: User = Depends(get_current_user)):
    """Get current user profile"""
    return current_user

@router.put("/profile", response_model=UserProfile)
def update_profile(
    profile: ProfileUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update name, address and phone of the current user"""
    return UserService.update_profile(
        db,
        current_user,
        name=profile.name,
        address=profile.address,
        phone=profile.phone
    )
