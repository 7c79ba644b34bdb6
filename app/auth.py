"""
Bearer-token auth for PawCity members: argon2 password hashes and short-lived JWT access tokens.
"""
from datetime import datetime, timedelta
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy.orm import Session
from app.config import get_settings
from app.database import get_db
from app.models.user import User
from app.schemas.user import TokenPayload

settings = get_settings()
bearer_scheme = HTTPBearer(auto_error=False)
passwords = CryptContext(schemes=["argon2"], deprecated="auto")

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    return passwords.hash(password)


def verify_password(plain: str, hashed: str | None) -> bool:
    """False for accounts without a stored hash."""
    return bool(hashed) and passwords.verify(plain, hashed)


def create_access_token(user_id: str, username: str) -> str:
    issued = datetime.utcnow()
    claims = {
        "sub": user_id,
        "username": username,
        "iat": issued,
        "exp": issued + timedelta(minutes=settings.access_token_expire_minutes),
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(claims, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str) -> TokenPayload | None:
    """Claims of a valid, unexpired access token; None for anything else."""
    try:
        claims = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
        payload = TokenPayload.model_validate(claims)
    except (JWTError, ValidationError):
        return None
    if payload.type != ACCESS_TOKEN_TYPE:
        return None
    return payload


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> User:
    if credentials is None:
        raise _unauthorized("Not authenticated")
    payload = decode_token(credentials.credentials)
    if payload is None:
        raise _unauthorized("Invalid or expired token")
    user = db.get(User, payload.sub)
    if user is None:
        raise _unauthorized("User not found")
    return user
