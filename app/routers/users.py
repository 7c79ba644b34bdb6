from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func
from sqlalchemy.orm import Session
from app.database import get_db
from app.models.user import User
from app.auth import get_current_user
from app.schemas.user import UserResponse, UserUpdate, PublicUserResponse

router = APIRouter(prefix="/api", tags=["users"])


@router.put("/user", response_model=UserResponse)
def update_profile(
    body: UserUpdate,
    user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Update own profile."""
    if body.email is not None:
        email = body.email.strip().lower()
        taken = db.query(User).filter(func.lower(User.email) == email, User.id != user.id).first()
        if taken:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email already registered")
        user.email = email
    for field in ("full_name", "phone", "location", "bio", "profile_picture", "show_email", "show_phone", "public_profile"):
        value = getattr(body, field)
        if value is not None:
            setattr(user, field, value)
    db.commit()
    db.refresh(user)
    return UserResponse.model_validate(user)


@router.get("/users/{user_id}", response_model=PublicUserResponse)
def get_public_profile(
    user_id: str,
    _viewer: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Another member's profile. Private profiles are reported as not found."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user or not user.public_profile:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return PublicUserResponse(
        id=user.id,
        username=user.username,
        full_name=user.full_name,
        location=user.location,
        bio=user.bio,
        profile_picture=user.profile_picture,
        email=user.email if user.show_email else None,
        phone=user.phone if user.show_phone else None,
    )
