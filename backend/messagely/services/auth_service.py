"""Authentication service: password hashing and token handling."""
from datetime import datetime, timedelta
from typing import Optional
import jwt
import bcrypt
from messagely.config import get_settings
from messagely.schemas.auth import TokenPayload

settings = get_settings()


def hash_password(password: str) -> str:
    """Hash a password using bcrypt with the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    try:
        return bcrypt.checkpw(
            plain_password.encode('utf-8'), 
            hashed_password.encode('utf-8')
        )
    except ValueError:
        # Not a bcrypt hash, or password over 72 bytes
        return False


def create_access_token(username: str) -> str:
    """Create a JWT access token carrying the username claim."""
    expire = datetime.utcnow() + timedelta(hours=settings.jwt_expire_hours)
    payload = {
        "username": username,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[TokenPayload]:
    """Decode and validate a JWT access token."""
    try:
        payload = jwt.decode(
            token, 
            settings.jwt_secret_key, 
            algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.PyJWTError:
        return None
