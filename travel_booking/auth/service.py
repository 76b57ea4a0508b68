import logging
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from travel_booking.models import User
from travel_booking.auth.utils import get_password_hash, verify_password
from typing import Optional

logger = logging.getLogger(__name__)

class UserService:
    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get user by email"""
        return db.query(User).filter(User.email == email).first()

    @staticmethod
    def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
        """Get user by ID"""
        return db.query(User).filter(User.id == user_id).first()

    @staticmethod
    def create_user(db: Session, email: str, password: str) -> User:
        """Create a new user"""
        if UserService.get_user_by_email(db, email):
            raise ValueError("Email already exists")

        db_user = User(
            email=email,
            password=get_password_hash(password)
        )

        try:
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
        except IntegrityError:
            db.rollback()
            raise ValueError("Email already exists")

        logger.info("Registered user id=%s", db_user.id)
        return db_user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> Optional[User]:
        """Authenticate user with email and password"""
        user = UserService.get_user_by_email(db, email)
        if not user:
            raise ValueError("User not found")
        if not verify_password(password, user.password):
            return None
        return user

    @staticmethod
    def update_profile(
        db: Session,
        user: User,
        name: Optional[str],
        address: Optional[str],
        phone: Optional[str]
    ) -> User:
        """Replace the user's profile fields"""
        user.name = name
        user.address = address
        user.phone = phone

        db.commit()
        db.refresh(user)
        return user
