from datetime import datetime
from pydantic import BaseModel, Field


class UserResponse(BaseModel):
    """Own profile. Never includes the password hash."""
    id: str
    username: str
    full_name: str
    email: str
    phone: str | None
    location: str
    bio: str | None
    profile_picture: str | None
    show_email: bool
    show_phone: bool
    public_profile: bool
    created_at: datetime

    class Config:
        from_attributes = True


class PublicUserResponse(BaseModel):
    """Profile as seen by other users; email/phone only when the owner opted in."""
    id: str
    username: str
    full_name: str
    location: str
    bio: str | None = None
    profile_picture: str | None = None
    email: str | None = None
    phone: str | None = None


class UserUpdate(BaseModel):
    """Profile fields a user may change. Username and password are not editable here."""
    full_name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=255)
    phone: str | None = None
    location: str | None = Field(None, min_length=1, max_length=100)
    bio: str | None = None
    profile_picture: str | None = None
    show_email: bool | None = None
    show_phone: bool | None = None
    public_profile: bool | None = None


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=6)
    full_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=255)
    location: str = Field(..., min_length=1, max_length=100)
    phone: str | None = None


class TokenPayload(BaseModel):
    sub: str  # user id
    username: str
    exp: int
    type: str = "access"


class LoginRequest(BaseModel):
    username: str  # username or email
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserResponse | None = None


class SetPasswordRequest(BaseModel):
    new_password: str
